import importlib

from config import get_settings_module

from src.site_attendance.site_attendance.main import create_app

app = create_app()


if __name__ == "__main__":
    settings = importlib.import_module(get_settings_module())
    app.run(host="0.0.0.0", port=int(getattr(settings, "PORT", 3000)), debug=bool(getattr(settings, "DEBUG", False)))
