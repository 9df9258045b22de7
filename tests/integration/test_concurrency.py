"""Catalog concurrency integration test.

Proves that ``repository.atomic()`` in ``CatalogService`` serialises
the duplicate check and the write of concurrent commands.

Scenario:
- 10 threads try to create the same SKU simultaneously.
- Exactly 1 succeeds, 9 get ``DuplicateSku``.
- The catalog holds a single record for that SKU.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from modules.products.dtos import ProductInputDTO
from modules.products.exceptions import DuplicateSku
from modules.products.repositories import InMemoryProductRepository
from modules.products.services import CatalogService
from shared.domain.result import Err, Ok

pytestmark = pytest.mark.integration

NUM_WORKERS = 10


def _dto(sku: int, name: str) -> ProductInputDTO:
    return ProductInputDTO.model_validate(
        {
            "sku": sku,
            "name": name,
            "inventory": {
                "warehouses": [{"locality": "SP", "quantity": 1, "type": "ECOMMERCE"}],
            },
        }
    )


class _SlowRepository(InMemoryProductRepository):
    """Widens the window between the duplicate check and the write."""

    def __init__(self, barrier: threading.Barrier) -> None:
        super().__init__()
        self._barrier = barrier

    def get(self, key):
        try:
            self._barrier.wait(timeout=0.2)
        except threading.BrokenBarrierError:
            pass
        return super().get(key)


def test_concurrent_creates_of_same_sku_store_one_record():
    repository = _SlowRepository(threading.Barrier(NUM_WORKERS))
    service = CatalogService(repository=repository)

    with ThreadPoolExecutor(max_workers=NUM_WORKERS) as pool:
        results = list(
            pool.map(lambda i: service.create_product(_dto(1, f"worker-{i}")), range(NUM_WORKERS))
        )

    successes = [r for r in results if isinstance(r, Ok)]
    failures = [r for r in results if isinstance(r, Err)]
    assert len(successes) == 1
    assert len(failures) == NUM_WORKERS - 1
    assert all(isinstance(f.error, DuplicateSku) for f in failures)
    assert repository.count() == 1


def test_concurrent_renames_onto_same_sku_keep_uniqueness():
    repository = InMemoryProductRepository()
    service = CatalogService(repository=repository)
    for sku in range(1, NUM_WORKERS + 1):
        service.create_product(_dto(sku, f"p{sku}")).unwrap()

    with ThreadPoolExecutor(max_workers=NUM_WORKERS) as pool:
        results = list(
            pool.map(
                lambda sku: service.update_product(sku, _dto(100, f"renamed-{sku}")),
                range(1, NUM_WORKERS + 1),
            )
        )

    assert sum(isinstance(r, Ok) for r in results) == 1
    skus = [p.sku for p in repository.list()]
    assert len(skus) == len(set(skus)) == NUM_WORKERS
    assert 100 in skus
