from pydantic_settings import BaseSettings


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings(BaseSettings):
    app_name: str = "Case Transcoder API"
    debug: bool = False
    log_level: str = "INFO"

    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Request/response case transform for JSON API routes
    case_transform_enabled: bool = True
    case_transform_prefixes: str = "/api,/system/api"
    case_transform_skip_paths: str = "/api/v2/user/session,/api/v2/user/profile,/api/transcode"
    case_transform_skip_header: str = "skip-case-transform"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> list[str]:
        return _split_csv(self.cors_origins)

    @property
    def case_transform_prefix_list(self) -> list[str]:
        return _split_csv(self.case_transform_prefixes)

    @property
    def case_transform_skip_path_list(self) -> list[str]:
        return _split_csv(self.case_transform_skip_paths)


settings = Settings()
