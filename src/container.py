"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et pour
l'integration dans un serveur hote (taches planifiees).
"""

from dependency_injector import containers, providers

from .adapters.api.cache import APICache
from .adapters.api.shoko_client import ShokoClient
from .config import Settings
from .core.ports.sync import IUserDataSyncManager
from .services.user_data_tasks import (
    ExportUserDataTask,
    ImportUserDataTask,
    SyncUserDataTask,
)


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Le gestionnaire de synchronisation est fourni par l'hote :

        container = Container()
        container.user_data_sync_manager.override(providers.Object(manager))
        task = container.import_user_data_task()
        client = container.shoko_client()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Cache API - Singleton pour partage entre clients
    api_cache = providers.Singleton(
        APICache,
        cache_dir=config.provided.cache_dir,
    )

    # Client API - Singleton pour beneficier du connection pooling
    shoko_client = providers.Singleton(
        ShokoClient,
        base_url=config.provided.shoko_url,
        cache=api_cache,
        api_key=config.provided.shoko_api_key,
        username=config.provided.shoko_username,
        password=config.provided.shoko_password,
        timeout=config.provided.request_timeout,
    )

    # Gestionnaire de synchronisation - dependance externe
    user_data_sync_manager = providers.Dependency(instance_of=IUserDataSyncManager)

    # Taches planifiees - Factory, une instance par enregistrement
    import_user_data_task = providers.Factory(
        ImportUserDataTask,
        user_sync_manager=user_data_sync_manager,
    )
    export_user_data_task = providers.Factory(
        ExportUserDataTask,
        user_sync_manager=user_data_sync_manager,
    )
    sync_user_data_task = providers.Factory(
        SyncUserDataTask,
        user_sync_manager=user_data_sync_manager,
    )
