# app/core/config.py

import os
from dotenv import load_dotenv

load_dotenv()  # Carga las variables de entorno desde .env

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./money_planner.db")
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"  # true imprime las queries

SECRET_KEY = os.getenv("SECRET_KEY", "cambia-esta-clave-en-produccion")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
