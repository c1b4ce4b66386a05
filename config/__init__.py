"""Settings modules chọn theo biến môi trường APP_ENV.

HR_SETTINGS_MODULE (nếu có) được ưu tiên, dùng khi cần trỏ tới một module
cấu hình riêng ngoài ba môi trường có sẵn.
"""

import os

_ENV_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
    "dev": "development",
    "development": "development",
}


def get_settings_module() -> str:
    explicit = os.getenv("HR_SETTINGS_MODULE", "").strip()
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").strip().lower()
    # Giá trị lạ rơi về development
    return f"config.{_ENV_ALIASES.get(env, 'development')}"
