from books_api.config import Settings
from books_api.infrastructure.persistence import (
    DynamoDbBookStore,
    RetryingBookStore,
    RetryPolicy,
    create_book_store,
)


class TestCreateBookStore:
    def test_live_mode_selects_production_region(self):
        store = create_book_store(Settings(env="live"))

        assert isinstance(store, RetryingBookStore)
        assert isinstance(store.inner, DynamoDbBookStore)
        assert store.inner.region == "eu-west-2"
        assert store.inner.endpoint_url is None

    def test_unset_mode_selects_local_endpoint(self):
        store = create_book_store(Settings(env=""))

        assert store.inner.region == "us-east-1"
        assert store.inner.endpoint_url == "http://localhost:8000"

    def test_unrecognized_mode_selects_local_endpoint(self):
        for mode in ("LIVE", "prod", "live "):
            store = create_book_store(Settings(env=mode))

            assert store.inner.endpoint_url == "http://localhost:8000"

    def test_wraps_with_policy_from_settings(self):
        settings = Settings(store_max_retries=2, store_base_delay_ms=50, store_max_delay_ms=500)

        store = create_book_store(settings)

        assert store.policy == RetryPolicy(max_retries=2, base_delay_ms=50, max_delay_ms=500)

    def test_each_call_builds_a_new_store(self):
        settings = Settings()

        assert create_book_store(settings) is not create_book_store(settings)
