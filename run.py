"""
run.py — Ponto de entrada de desenvolvimento do HookGate_FLS.

Uso:
    python run.py                      # modo desenvolvimento (padrão)
    FLASK_ENV=production python run.py # modo produção
"""

import os

from api import create_app
from api.config import DevelopmentConfig, ProductionConfig
from internalloggin.logger import setup_logger

logger = setup_logger("HookGate_FLS.run")

_ENV_MAP = {
    "production": ProductionConfig,
    "prod":       ProductionConfig,
}


def _select_config(env: str):
    """Classe de configuração para o ambiente informado em FLASK_ENV."""
    return _ENV_MAP.get(env, DevelopmentConfig)


env = os.getenv("FLASK_ENV", "development").lower()
app = create_app(config_class=_select_config(env))

if __name__ == "__main__":
    logger.info(
        "HookGate_FLS iniciado (%s) — receivers: %s",
        env, ", ".join(sorted(app.config["WEBHOOK_RECEIVERS"])),
    )
    app.run(
        host=os.getenv("FLASK_HOST", "127.0.0.1"),
        port=int(os.getenv("FLASK_PORT", 5000)),
        debug=env not in _ENV_MAP and bool(app.config.get("DEBUG", False)),
    )
