"""Tests for server and deployment contexts."""

from launchpad.services.context import Deployment, ServerState


class TestServerState:
    def test_defaults(self) -> None:
        server = ServerState()

        assert server.get_separator() == "/"
        assert server.get_line_endings() == "\n"

    def test_missing_value_is_none(self) -> None:
        assert ServerState().get_value("paths.php") is None

    def test_set_value(self) -> None:
        server = ServerState()
        server.set_value("paths.php", False)

        assert server.get_value("paths.php") is False


class TestDeployment:
    def test_home_folder(self) -> None:
        deployment = Deployment(root_directory="/var/www", application_name="shop")

        assert deployment.get_folder() == "/var/www/shop"

    def test_home_folder_per_stage(self) -> None:
        deployment = Deployment(
            root_directory="/var/www", application_name="shop", stage="staging"
        )

        assert deployment.get_folder() == "/var/www/shop/staging"
        assert deployment.get_folder("releases") == "/var/www/shop/staging/releases"

    def test_relative_folder(self) -> None:
        deployment = Deployment(root_directory="/var/www", application_name="shop")

        assert deployment.get_folder("shared/logs") == "/var/www/shop/shared/logs"

    def test_absolute_folder_unchanged(self) -> None:
        deployment = Deployment(root_directory="/var/www", application_name="shop")

        assert deployment.get_folder("/tmp/build") == "/tmp/build"

    def test_get_path(self) -> None:
        deployment = Deployment(binary_paths={"php": "/usr/bin/php7"})

        assert deployment.get_path("php") == "/usr/bin/php7"
        assert deployment.get_path("node") is None

    def test_get_stage(self) -> None:
        assert Deployment().get_stage() is None
        assert Deployment(stage="prod").get_stage() == "prod"
