from django.apps import AppConfig


class ProductsConfig(AppConfig):
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        from modules.products.repositories import InMemoryProductRepository
        from modules.products.services import CatalogService

        # The catalog lives as long as the process; each app registry
        # owns its own store.
        self.repository = InMemoryProductRepository()
        self.service = CatalogService(repository=self.repository)
