from pydantic_settings import BaseSettings


class GatewaySettings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 5000
    max_upload_bytes: int = 25 * 1024 * 1024

    model_config = {"env_prefix": "GATEWAY_", "env_file": ".env", "extra": "ignore"}


class ProviderSettings(BaseSettings):
    api_key: str = ""
    base_url: str = "https://api.elevenlabs.io"
    model_id: str = "scribe_v1"
    language_code: str = "en"
    diarize: bool = True
    tag_audio_events: bool = True
    timeout_s: float = 60.0

    model_config = {"env_prefix": "ELEVENLABS_", "env_file": ".env", "extra": "ignore"}
