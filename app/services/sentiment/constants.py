"""Provider constants for the sentiment service."""

# Gradio Spaces expose the prediction route here by default
HF_SPACE_DEFAULT_PATH = "api/predict"

# Tried after the configured path, for older Gradio releases
HF_SPACE_FALLBACK_PATHS = ("run/predict", "run/predict/")

CUSTOM_DEFAULT_PATH = "analyze"

# Returned when a candidate list yields no attempt at all
NO_ATTEMPT_STATUS = 404
