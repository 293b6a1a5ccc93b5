# Application Package
from .credentials_loader import load_api_key_credentials

__all__ = ["load_api_key_credentials"]
