"""Programmer errors raised by the marketplace core"""


class StoreNotInitializedError(RuntimeError):
    """A store was requested before the application constructed it"""

    def __init__(self, store_name: str) -> None:
        super().__init__(
            f"{store_name} must be used within an initialized application. "
            "Run the app inside its lifespan (e.g. `with TestClient(app)`)."
        )
        self.store_name = store_name
