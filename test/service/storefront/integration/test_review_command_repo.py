from typing import Callable

import pytest
from sqlalchemy import text
from sqlalchemy.engine import Engine

from src.platform.database.orm_db_setting import Database
from src.platform.exception.exceptions import ConstraintViolationError
from src.service.storefront.domain.entity.review_entity import ReviewEntity
from src.service.storefront.driven_adapter.model.review_model import ReviewModel
from src.service.storefront.driven_adapter.repo.review_command_repo_impl import (
    ReviewCommandRepoImpl,
)
from src.service.storefront.driven_adapter.repo.review_query_repo_impl import ReviewQueryRepoImpl
from src.service.storefront.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl


@pytest.fixture
def database() -> Database:
    return Database()


@pytest.mark.integration
@pytest.mark.usefixtures('dispose_engines_after')
class TestReviewCommandRepo:
    async def test_create_review_valid_product__timestamps_populated(
        self, database: Database, create_product: Callable[..., int]
    ) -> None:
        product_id = create_product()
        repo = ReviewCommandRepoImpl(session_factory=database.session)

        review = await repo.create(ReviewEntity(product_id=product_id, content='Solid'))

        assert review.id is not None
        assert review.product_id == product_id
        assert review.content == 'Solid'
        assert review.created_at is not None
        assert review.updated_at is not None

    async def test_create_review_dangling_product__constraint_violation(
        self, database: Database, sync_engine: Engine
    ) -> None:
        repo = ReviewCommandRepoImpl(session_factory=database.session)

        with pytest.raises(ConstraintViolationError) as exc_info:
            await repo.create(ReviewEntity(product_id=123456, content='orphan'))

        assert exc_info.value.status_code == 409
        with sync_engine.connect() as conn:
            count = conn.execute(text('SELECT COUNT(*) FROM reviews')).scalar_one()
        assert count == 0

    async def test_create_review_product_id_beyond_integer_range__constraint_violation(
        self, database: Database
    ) -> None:
        repo = ReviewCommandRepoImpl(session_factory=database.session)

        with pytest.raises(ConstraintViolationError) as exc_info:
            await repo.create(ReviewEntity(product_id=2**63, content='orphan'))

        assert exc_info.value.status_code == 409

    async def test_orm_update_refreshes_updated_at_only(
        self, database: Database, create_product: Callable[..., int], sync_engine: Engine
    ) -> None:
        product_id = create_product()
        repo = ReviewCommandRepoImpl(session_factory=database.session)
        review = await repo.create(ReviewEntity(product_id=product_id, content='draft'))
        with sync_engine.begin() as conn:
            conn.execute(
                text(
                    "UPDATE reviews SET created_at = '2000-01-01 00:00:00', "
                    "updated_at = '2000-01-01 00:00:00' WHERE id = :id"
                ),
                {'id': review.id},
            )

        async with database.session() as session:
            review_model = await session.get(ReviewModel, review.id)
            assert review_model is not None
            review_model.content = 'final'
            await session.commit()
            await session.refresh(review_model)

        assert review_model.content == 'final'
        assert review_model.created_at.year == 2000
        assert review_model.updated_at.year > 2000

    async def test_list_by_product_id__only_that_product(
        self, database: Database, create_product: Callable[..., int]
    ) -> None:
        product_id = create_product()
        other_product_id = create_product('Oak Shelf')
        command_repo = ReviewCommandRepoImpl(session_factory=database.session)
        query_repo = ReviewQueryRepoImpl(session_factory=database.session)
        await command_repo.create(ReviewEntity(product_id=product_id, content='a'))
        await command_repo.create(ReviewEntity(product_id=other_product_id, content='b'))
        await command_repo.create(ReviewEntity(product_id=product_id, content=None))

        reviews = await query_repo.list_by_product_id(product_id)

        assert [review.content for review in reviews] == ['a', None]


@pytest.mark.integration
@pytest.mark.usefixtures('dispose_engines_after')
class TestUserQueryRepo:
    async def test_get_by_id_exact_match(self, database: Database, create_user) -> None:
        user = create_user('Jane Doe', 'jane@example.com')
        repo = UserQueryRepoImpl(session_factory=database.session)

        found = await repo.get_by_id(user['id'])
        missing = await repo.get_by_id(user['id'] + 1000)

        assert found is not None
        assert found.email == 'jane@example.com'
        assert found.created_at is not None
        assert missing is None

    async def test_get_by_id_beyond_integer_range_is_absent(self, database: Database) -> None:
        repo = UserQueryRepoImpl(session_factory=database.session)

        assert await repo.get_by_id(2**63) is None
        assert await repo.get_by_id(0) is None
