from pathlib import Path

from tclogger import OSEnver, logger

configs_root = Path(__file__).parents[1] / "configs"
envs_path = configs_root / "envs.json"
ENVS_ENVER = OSEnver(envs_path)
SORT_APP_ENVS = ENVS_ENVER["sort_app"]

GEO_SORT_DEFAULTS = {"strict_ties": True, "verbose": False}

try:
    geo_sort_envs = ENVS_ENVER["geo_sort"]
except KeyError:
    geo_sort_envs = None

if geo_sort_envs:
    GEO_SORT_ENVS = {**GEO_SORT_DEFAULTS, **geo_sort_envs}
else:
    GEO_SORT_ENVS = dict(GEO_SORT_DEFAULTS)
    logger.warn(
        f"WARN: geo_sort not found in {envs_path}. Using defaults though: {GEO_SORT_DEFAULTS}."
    )
