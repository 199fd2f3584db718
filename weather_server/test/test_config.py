from weather_server.utils.config import DEFAULT_CWA_API_BASE_URL, load_settings


def test_defaults_when_environment_is_empty():
    settings = load_settings({})

    assert settings.port == 3000
    assert settings.env == "development"
    assert settings.cwa_api_key is None
    assert settings.cwa_api_base_url == DEFAULT_CWA_API_BASE_URL
    assert settings.cwa_dataset_id == "F-C0032-001"
    assert settings.cors_origins == ["*"]


def test_values_are_read_from_environment():
    settings = load_settings({
        "PORT": "8080",
        "CWA_API_KEY": "CWA-123",
        "NODE_ENV": "Production",
        "CWA_API_BASE_URL": "http://localhost:9000/api/",
        "CORS_ORIGINS": "http://localhost:5173, http://127.0.0.1:5173",
        "LOG_LEVEL": "debug",
    })

    assert settings.port == 8080
    assert settings.cwa_api_key == "CWA-123"
    assert settings.env == "production"
    assert settings.cwa_api_base_url == "http://localhost:9000/api"
    assert settings.cors_origins == ["http://localhost:5173", "http://127.0.0.1:5173"]
    assert settings.log_level == "DEBUG"


def test_blank_api_key_counts_as_missing():
    assert load_settings({"CWA_API_KEY": ""}).cwa_api_key is None


def test_env_takes_precedence_over_node_env():
    assert load_settings({"ENV": "staging", "NODE_ENV": "production"}).env == "staging"
