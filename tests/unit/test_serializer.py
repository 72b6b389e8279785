"""
配置文本输出单元测试
"""

from rich.text import Text

from fuel_tools.config import ClientConfig, ServerConfig
from fuel_tools.utils.uri import URI


def full_server() -> ServerConfig:
    server = ServerConfig()
    server.set_url(URI("http://serverurl.com"))
    server.set_version("2.0")
    server.set_api_key("ABCD")
    return server


class TestAsString:
    """纯文本输出测试"""

    def test_empty_client(self):
        assert ClientConfig().as_string() == "Config path: \nCache location: \nServers:\n"

    def test_empty_server(self):
        assert ServerConfig().as_string() == "URL: \nVersion: 1.0\nAPI key: \n"

    def test_full_server(self):
        text = full_server().as_string()
        assert text == "URL: http://serverurl.com\nVersion: 2.0\nAPI key: ABCD\n"
        assert "local_name" not in text

    def test_prefix(self):
        assert ServerConfig().as_string("  ") == "  URL: \n  Version: 1.0\n  API key: \n"

    def test_client_with_server(self):
        client = ClientConfig()
        client.set_config_path("config/path")
        client.set_cache_location("cache/location")
        client.add_server(ServerConfig(url="http://serverurl.com"))

        assert client.as_string() == (
            "Config path: config/path\n"
            "Cache location: cache/location\n"
            "Servers:\n"
            "  ---\n"
            "  URL: http://serverurl.com\n"
            "  Version: 1.0\n"
            "  API key: \n"
        )

    def test_str(self):
        assert str(ServerConfig()) == ServerConfig().as_string()


class TestAsPrettyString:
    """彩色输出测试"""

    def test_empty_server(self):
        assert ServerConfig().as_pretty_string() == "\x1B[96m\x1B[1mVersion: \x1B[0m\x1B[37m1.0\x1B[0m\n"

    def test_all_fields_empty(self):
        server = ServerConfig()
        server.set_version("")
        assert server.as_pretty_string() == ""

    def test_full_server(self):
        text = full_server().as_pretty_string()
        assert "http://serverurl.com" in text
        assert "local_name" not in text
        assert "2.0" in text
        assert "ABCD" in text
        assert Text.from_ansi(text).plain == (
            "URL: http://serverurl.com\nVersion: 2.0\nAPI key: ABCD\n"
        )

    def test_empty_client(self):
        text = ClientConfig().as_pretty_string()
        assert Text.from_ansi(text).plain == "Servers:\n"

    def test_client_with_server(self):
        client = ClientConfig()
        client.set_config_path("config/path")
        client.add_server(full_server())

        plain = Text.from_ansi(client.as_pretty_string()).plain
        assert plain == (
            "Config path: config/path\n"
            "Servers:\n"
            "  ---\n"
            "  URL: http://serverurl.com\n"
            "  Version: 2.0\n"
            "  API key: ABCD\n"
        )
