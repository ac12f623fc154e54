"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.service.storefront.driven_adapter.repo.product_command_repo_impl import (
    ProductCommandRepoImpl,
)
from src.service.storefront.driven_adapter.repo.product_query_repo_impl import (
    ProductQueryRepoImpl,
)
from src.service.storefront.driven_adapter.repo.review_command_repo_impl import (
    ReviewCommandRepoImpl,
)
from src.service.storefront.driven_adapter.repo.review_query_repo_impl import (
    ReviewQueryRepoImpl,
)
from src.service.storefront.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl


class Container(containers.DeclarativeContainer):
    # Database (uses AsyncEngineManager; reads go to the replica when configured)
    database = providers.Singleton(Database, read_only=False)
    read_database = providers.Singleton(Database, read_only=True)

    # Repositories (stateless - use session_factory per-request)
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=read_database.provided.session
    )
    product_command_repo = providers.Singleton(
        ProductCommandRepoImpl, session_factory=database.provided.session
    )
    product_query_repo = providers.Singleton(
        ProductQueryRepoImpl, session_factory=read_database.provided.session
    )
    review_command_repo = providers.Singleton(
        ReviewCommandRepoImpl, session_factory=database.provided.session
    )
    review_query_repo = providers.Singleton(
        ReviewQueryRepoImpl, session_factory=read_database.provided.session
    )


container = Container()