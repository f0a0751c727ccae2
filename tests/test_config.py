from mumbleclient.config import AuthConfig, Config, NetConfig


def _config():
    password = "password"
    return Config("localhost", 64738, "alice", password)


def test_net_part():
    assert _config().net() == NetConfig("localhost", 64738)


def test_auth_part():
    password = "password"
    assert _config().auth() == AuthConfig("alice", password)


def test_fields_kept():
    config = _config()
    assert config.hostname == "localhost"
    assert config.port == 64738
    assert config.username == "alice"


def test_parts_follow_changes():
    config = _config()
    config.port = 1234
    config.username = "bob"
    assert config.net().port == 1234
    assert config.auth().username == "bob"


def test_empty_password_allowed():
    config = Config("example.com", 64738, "guest", "")
    assert config.auth().password == ""