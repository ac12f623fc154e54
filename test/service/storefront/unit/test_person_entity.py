from xml.etree import ElementTree

import attrs
import pytest

from src.service.storefront.app.query.get_person_use_case import GetPersonUseCase
from src.service.storefront.domain.entity.person_entity import PersonEntity
from src.service.storefront.driving_adapter.http_controller.xml_response import render_xml


@pytest.mark.unit
class TestPersonEntity:
    def test_default_person_has_fixed_name_and_bio(self) -> None:
        person = PersonEntity.default()

        assert person.name == 'David Heinemeier Hansson'
        assert person.bio.startswith('A product of Danish Design')

    def test_person_is_immutable(self) -> None:
        person = PersonEntity.default()

        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            person.name = 'Someone Else'  # type: ignore[misc]

    def test_person_has_exactly_name_and_bio(self) -> None:
        assert [field.name for field in attrs.fields(PersonEntity)] == ['name', 'bio']

    def test_use_case_ignores_everything_and_returns_default(self) -> None:
        assert GetPersonUseCase().get_person() == PersonEntity.default()


@pytest.mark.unit
class TestRenderXml:
    def test_render_person_is_well_formed(self) -> None:
        body = render_xml('person', PersonEntity.default())

        root = ElementTree.fromstring(body)
        assert root.tag == 'person'
        assert [child.tag for child in root] == ['name', 'bio']
        assert root.findtext('name') == 'David Heinemeier Hansson'
        assert root.findtext('bio') == "A product of Danish Design during the Winter of '79..."

    def test_render_starts_with_xml_declaration(self) -> None:
        body = render_xml('person', PersonEntity.default())

        assert body.startswith(b'<?xml')

    def test_render_escapes_markup(self) -> None:
        body = render_xml('person', PersonEntity(name='<b>Bold</b> & co', bio=''))

        assert b'&lt;b&gt;Bold&lt;/b&gt; &amp; co' in body
        assert ElementTree.fromstring(body).findtext('name') == '<b>Bold</b> & co'
