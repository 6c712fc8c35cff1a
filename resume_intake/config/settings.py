from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_file_size_bytes: int = 10 * 1024 * 1024
    min_text_length: int = 100
    max_text_length: int = 100_000

    pdf_engine: str = "pdfplumber"
    pdf_x_tolerance: float = 1.5

    ocr_language: str = "eng"
    ocr_max_pages: int = 5
    ocr_dpi: int = 200
    tesseract_cmd: str = ""

    enhancement_enabled: bool = True
    enhancement_provider: str = "ollama"
    enhancement_min_length_ratio: float = 0.5
    enhancement_timeout_seconds: int = 30
    enhancement_temperature: float = 0.1

    enhancement_ollama_base_url: str = "http://localhost:11434"
    enhancement_ollama_model_name: str = "llama3.2:latest"

    enhancement_openai_api_key: str = ""
    enhancement_openai_model_name: str = "gpt-4o-mini"

    enhancement_openai_compatible_base_url: str = ""
    enhancement_openai_compatible_api_key: str = ""
    enhancement_openai_compatible_model_name: str = ""

    enhancement_openrouter_api_key: str = ""
    enhancement_openrouter_model_name: str = ""
    enhancement_groq_api_key: str = ""
    enhancement_groq_model_name: str = ""
    enhancement_together_api_key: str = ""
    enhancement_together_model_name: str = ""
    enhancement_deepseek_api_key: str = ""
    enhancement_deepseek_model_name: str = ""
