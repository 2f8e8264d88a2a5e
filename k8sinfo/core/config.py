from pydantic_settings import BaseSettings
from typing import Optional
import os


class Settings(BaseSettings):
    """Application settings"""
    
    # API Settings
    app_name: str = "k8sinfo"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8080
    
    # Kubernetes Settings
    kubeconfig_path: str = os.path.expanduser("~/.kube/config")
    
    # CORS Settings
    allowed_origin: str = "*"
    allowed_methods: list = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    allowed_headers: list = [
        "Origin",
        "Content-Type",
        "Content-Length",
        "Accept-Encoding",
        "X-CSRF-Token",
        "Authorization",
    ]
    
    class Config:
        env_file = ".env"
        case_sensitive = False


def load_settings(
    kubeconfig_path: Optional[str] = None,
    port: Optional[int] = None,
    host: Optional[str] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Build settings, letting explicitly given values win over the environment"""
    overrides = {
        "kubeconfig_path": kubeconfig_path,
        "port": port,
        "host": host,
        "log_level": log_level,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})
