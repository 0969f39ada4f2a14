import logging

import yaml

from mandel.datatypes import RenderSettings, View


default_settings = RenderSettings()


def settings_to_dict(settings):
    """Convert RenderSettings to a dictionary for YAML serialization."""
    return {
        "location": {
            "left": settings.view.left,
            "right": settings.view.right,
            "top": settings.view.top,
            "bottom": settings.view.bottom,
        },
        "computation": {
            "iterations": settings.max_iterations,
            "workers": settings.workers,
        },
        "presentation": {
            "width": settings.width,
            "height": settings.height,
            "colormap": settings.colormap,
            "gamma": settings.gamma,
        },
    }


def _optional_int(value):
    return None if value is None else int(value)


def dict_to_settings(settings_dict):
    """Convert a dictionary to a RenderSettings object, filling gaps with defaults."""
    settings_dict = settings_dict or {}
    location = settings_dict.get("location") or {}
    computation = settings_dict.get("computation") or {}
    presentation = settings_dict.get("presentation") or {}
    view = default_settings.view
    return RenderSettings(
        view=View(
            left=float(location.get("left", view.left)),
            right=float(location.get("right", view.right)),
            top=float(location.get("top", view.top)),
            bottom=float(location.get("bottom", view.bottom)),
        ),
        width=int(presentation.get("width", default_settings.width)),
        height=_optional_int(presentation.get("height", default_settings.height)),
        max_iterations=int(computation.get("iterations", default_settings.max_iterations)),
        workers=_optional_int(computation.get("workers", default_settings.workers)),
        colormap=presentation.get("colormap", default_settings.colormap),
        gamma=float(presentation.get("gamma", default_settings.gamma)),
    )


def load_settings(file_path):
    """Load render settings from a YAML file."""
    with open(file_path, "r") as file:
        settings = dict_to_settings(yaml.safe_load(file))
    logging.info(f"Settings loaded from {file_path}")
    return settings


def save_settings(settings, file_path):
    """Save render settings to a YAML file."""
    with open(file_path, "w") as file:
        yaml.dump(settings_to_dict(settings), file, default_flow_style=False)
    logging.info(f"Settings saved to {file_path}")
