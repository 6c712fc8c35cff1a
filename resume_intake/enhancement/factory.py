from typing import ClassVar

from resume_intake.config.settings import Settings
from resume_intake.enhancement.base import BaseEnhancer, PassthroughEnhancer
from resume_intake.enhancement.client_base import BaseEnhancementClient
from resume_intake.enhancement.enhancer import Enhancer
from resume_intake.enhancement.ollama_client_adapter import OllamaClientAdapter
from resume_intake.enhancement.openai_client_adapter import OpenAIClientAdapter


class EnhancerFactory:
    """Creates the configured enhancer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseEnhancer:
        """Create an enhancer from application settings."""
        provider = settings.enhancement_provider.strip().lower()
        if not settings.enhancement_enabled or provider == "none":
            return PassthroughEnhancer()
        return Enhancer(
            client=cls._create_client(provider, settings),
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.enhancement_temperature,
            min_length_ratio=settings.enhancement_min_length_ratio,
        )

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseEnhancementClient:
        if provider == "ollama":
            return OllamaClientAdapter(
                base_url=settings.enhancement_ollama_base_url,
                timeout_seconds=settings.enhancement_timeout_seconds,
            )
        return OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=settings.enhancement_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.enhancement_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "enhancement_openai_compatible_base_url is required for "
                    "enhancement_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "none",
            "ollama",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown enhancement provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.enhancement_openai_api_key,
            "openai_compatible": settings.enhancement_openai_compatible_api_key,
            "openrouter": settings.enhancement_openrouter_api_key,
            "groq": settings.enhancement_groq_api_key,
            "together": settings.enhancement_together_api_key,
            "deepseek": settings.enhancement_deepseek_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "ollama": settings.enhancement_ollama_model_name,
            "openai": settings.enhancement_openai_model_name,
            "openai_compatible": settings.enhancement_openai_compatible_model_name,
            "openrouter": settings.enhancement_openrouter_model_name,
            "groq": settings.enhancement_groq_model_name,
            "together": settings.enhancement_together_model_name,
            "deepseek": settings.enhancement_deepseek_model_name,
        }
        return key_map.get(provider, "") or ""
