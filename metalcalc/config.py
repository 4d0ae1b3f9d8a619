from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Metal Weight Calculator"
    LOG_LEVEL: str = "INFO"

    # Mild steel, g/cm³. Used whenever the density input is blank or zero
    DEFAULT_DENSITY_G_CM3: float = 7.85

    # Quiet period before the controller recomputes after an input change
    DEBOUNCE_SECONDS: float = 0.18

    WEIGHT_DECIMALS: int = 3
    PRICE_DECIMALS: int = 2

    class Config:
        env_file = ".env"


settings = Settings()
