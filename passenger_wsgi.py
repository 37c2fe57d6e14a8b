import os
import sys

# Ensure app root is on sys.path
APP_ROOT = os.path.dirname(__file__)
sys.path.insert(0, APP_ROOT)

# Production-safe envs (optional)
os.environ.setdefault("FLASK_ENV", "production")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# Expose WSGI application for Passenger
from app import app as application
