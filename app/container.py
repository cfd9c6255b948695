from dotenv import load_dotenv

load_dotenv()

from pathlib import Path

from dependency_injector import containers, providers

from app.constants import StorageConfig
from app.recipe.repository import RecipeRepository
from app.recipe.service import RecipeService
from app.recipe.session import RecipeSession
from app.storage.store import JsonFileStore


class Container(containers.DeclarativeContainer):
    """의존성 주입 컨테이너"""

    # Configuration
    wiring_config = containers.WiringConfiguration(
        packages=[
            "app.recipe",
        ]
    )
    config = providers.Configuration()
    config.storage.path.from_env("RECIPE_STORE_PATH", default=StorageConfig.DEFAULT_STORE_PATH)

    # Storage
    store = providers.Singleton(
        JsonFileStore,
        path=providers.Factory(Path, config.storage.path),
    )

    # Recipe
    recipe_session = providers.Singleton(RecipeSession)
    recipe_repository = providers.Factory(
        RecipeRepository,
        store=store,
    )
    recipe_service = providers.Factory(
        RecipeService,
        session=recipe_session,
        repository=recipe_repository,
    )


# 전역 컨테이너 인스턴스
container = Container()
