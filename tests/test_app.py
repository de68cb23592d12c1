"""Import smoke test: the module-level app and ORM mappings build without errors."""

import unittest

from fastapi.testclient import TestClient


class TestAppImport(unittest.TestCase):
    def test_main_module_builds_app(self) -> None:
        from tracker.main import app

        paths = {route.path for route in app.routes}
        self.assertIn("/api/login", paths)
        self.assertIn("/api/tasks/{task_id}", paths)

    def test_models_carry_timestamp_columns(self) -> None:
        from tracker.models import Project, Task

        for model in (Project, Task):
            columns = model.__table__.columns
            self.assertIn("created_at", columns)
            self.assertIn("updated_at", columns)
        self.assertIsNot(Project.__table__.c.created_at, Task.__table__.c.created_at)

    def test_root_route(self) -> None:
        from tracker.main import app

        resp = TestClient(app).get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Task Tracker API"})

    def test_openapi_registers_bearer_scheme(self) -> None:
        from tracker.main import app

        schemes = app.openapi()["components"]["securitySchemes"]
        self.assertEqual(schemes["HTTPBearer"]["scheme"], "bearer")


if __name__ == "__main__":
    unittest.main()
