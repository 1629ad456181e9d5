import main


def test_main_initializes_and_always_closes_pool(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "init_pool", lambda: calls.append("init"))
    monkeypatch.setattr(main, "create_tables", lambda: calls.append("schema"))
    monkeypatch.setattr(main, "close_pool", lambda: calls.append("close"))

    class FakeService:
        def get_stats(self):
            calls.append("stats")
            return {"books": 0, "authors": 0, "genres": 0}

        def list_books(self):
            calls.append("list")
            return "The catalog is empty."

    monkeypatch.setattr(main, "CatalogService", FakeService)

    main.main()

    assert calls == ["init", "schema", "stats", "list", "close"]
