import unittest

from app.routes.health.endpoint import endpoint_health


class RouteHealthTest(unittest.TestCase):
    def test_health(self) -> None:
        response = endpoint_health()
        self.assertEqual(response.status, "healthy")
        self.assertEqual(response.languages, ["JavaScript", "Python", "TypeScript"])


if __name__ == "__main__":
    unittest.main()
