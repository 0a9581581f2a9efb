from .base import *  # noqa
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
DEBUG = True
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="Lq4vW9cTn2Rk7yHs1Pd6Xb3Jm8Gf0Ze5Ua2Vo7Ki4Nt9Ew1Ry6Cx3Bh8Mj5",
)
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1"] + env.list("DJANGO_ALLOWED_HOSTS", default=[])
CSRF_TRUSTED_ORIGINS = ["https://*.127.0.0.1"] + env.list("CSRF_TRUSTED_ORIGINS", default=[])

# Key Points
# ------------------------------------------------------------------------------
LOGGING["loggers"]["keypoints"]["level"] = env("KEYPOINTS_LOG_LEVEL", default="DEBUG")  # noqa: F405
