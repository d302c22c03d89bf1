import pytest

from algokit.config import Config, DatabaseConfig, ServerConfig, get_config, load_config

ENV_NAMES = [
    "SERVER_PORT",
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_DBNAME",
    "DB_SSLMODE",
    "DB_TIMEZONE",
]

SAMPLE = """\
server:
  port: 8080
db:
  host: localhost
  port: 5432
  user: user
  password: password
  dbname: cockroach
  sslmode: disable
  timezone: Asia/Bangkok
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def config_dir(tmp_path):
    (tmp_path / "config.yaml").write_text(SAMPLE, encoding="utf-8")
    return tmp_path


def test_load_from_directory(config_dir):
    password = "password"
    config = load_config(config_dir)
    assert config == Config(
        server=ServerConfig(port=8080),
        db=DatabaseConfig(
            host="localhost",
            port=5432,
            user="user",
            password=password,
            dbname="cockroach",
            sslmode="disable",
            timezone="Asia/Bangkok",
        ),
    )


def test_load_from_file_path(config_dir):
    assert load_config(config_dir / "config.yaml") == load_config(config_dir)


def test_environment_overrides_file(config_dir, monkeypatch):
    monkeypatch.setenv("SERVER_PORT", "9090")
    monkeypatch.setenv("DB_HOST", "db.example.com")
    config = load_config(config_dir)
    assert config.server.port == 9090
    assert config.db.host == "db.example.com"
    assert config.db.port == 5432


def test_empty_environment_value_is_ignored(config_dir, monkeypatch):
    monkeypatch.setenv("DB_USER", "")
    assert load_config(config_dir).db.user == "user"


def test_keys_are_case_insensitive(tmp_path):
    (tmp_path / "config.yaml").write_text(
        "Server:\n  Port: 80\nDb:\n  DBName: shop\n  SSLMode: require\n",
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.server.port == 80
    assert config.db.dbname == "shop"
    assert config.db.sslmode == "require"


def test_missing_sections_use_defaults(tmp_path):
    (tmp_path / "config.yaml").write_text("server:\n  port: 1\n", encoding="utf-8")
    assert load_config(tmp_path).db == DatabaseConfig()


def test_string_port_is_converted(tmp_path):
    (tmp_path / "config.yaml").write_text("server:\n  port: '7000'\n", encoding="utf-8")
    assert load_config(tmp_path).server.port == 7000


def test_invalid_port_raises(tmp_path):
    (tmp_path / "config.yaml").write_text("server:\n  port: abc\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(tmp_path)


def test_malformed_yaml_raises(tmp_path):
    (tmp_path / "config.yaml").write_text("server: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(tmp_path)


def test_non_mapping_document_raises(tmp_path):
    (tmp_path / "config.yaml").write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(tmp_path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path)


def test_get_config_reads_working_directory_once(config_dir, monkeypatch):
    monkeypatch.chdir(config_dir)
    first = get_config()
    (config_dir / "config.yaml").write_text("server:\n  port: 1\n", encoding="utf-8")
    assert get_config() is first
    assert first.server.port == 8080


def test_get_config_raises_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        get_config()