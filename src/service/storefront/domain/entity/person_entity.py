import attrs


DEFAULT_PERSON_NAME = 'David Heinemeier Hansson'
DEFAULT_PERSON_BIO = "A product of Danish Design during the Winter of '79..."


@attrs.frozen
class PersonEntity:
    """Per-request value object; never persisted."""

    name: str
    bio: str

    @classmethod
    def default(cls) -> 'PersonEntity':
        return cls(name=DEFAULT_PERSON_NAME, bio=DEFAULT_PERSON_BIO)
