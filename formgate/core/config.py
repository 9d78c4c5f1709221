from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Dict, Optional, List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    # EmailJS relay - used when the site is served from a static host
    emailjs_api_url: str = "https://api.emailjs.com/api/v1.0/email/send"
    emailjs_service_id: Optional[str] = None
    emailjs_public_key: Optional[str] = None
    emailjs_private_key: Optional[str] = None  # Optional accessToken for strict mode
    emailjs_template_notification: Optional[str] = None
    emailjs_template_confirmation: Optional[str] = None
    relay_timeout: float = 15.0

    # First-party backend - used when the site is served from the dynamic host
    backend_base_url: Optional[str] = None  # Defaults to the page origin
    backend_scheme: str = "https"
    backend_timeout: float = 15.0

    # Hosting detection
    dynamic_host_suffix: str = "replit.app"
    static_host_suffixes: List[str] = ["github.io", "netlify.app", "pages.dev"]

    # Framework PDF handed over by the lead form
    artifact_path: str = "/CDFI-SPF.pdf"
    artifact_filename: str = "CDFI-Security-Privacy-Framework.pdf"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def relay_settings_status(self, with_confirmation: bool = True) -> Dict[str, bool]:
        """Relay setting name -> whether it is configured"""
        required = {
            "EMAILJS_SERVICE_ID": self.emailjs_service_id,
            "EMAILJS_PUBLIC_KEY": self.emailjs_public_key,
            "EMAILJS_TEMPLATE_NOTIFICATION": self.emailjs_template_notification,
        }
        if with_confirmation:
            required["EMAILJS_TEMPLATE_CONFIRMATION"] = self.emailjs_template_confirmation
        return {name: bool(value) for name, value in required.items()}

    def missing_relay_settings(self, with_confirmation: bool = True) -> List[str]:
        return [name for name, present in self.relay_settings_status(with_confirmation).items() if not present]


@lru_cache
def get_settings():
    return Settings()
