from ropm.models import Backend
from ropm.backends import default, flatpak

BACKENDS = {
    Backend.CONTAINERIZED: flatpak,
    Backend.NORMAL: default,
}

__all__ = ["BACKENDS", "default", "flatpak"]
