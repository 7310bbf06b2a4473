# -----------------------------
# FILE: hypernav/errors.py
# -----------------------------


class EnvError(Exception):
    """Base class for all environment errors with a stable error code."""
    code: str = "ENV_ERROR"
    hint: str = ""

    def __init__(self, message: str = "", *, hint: str = ""):
        super().__init__(message)
        if hint:
            self.hint = hint

    def __str__(self):
        base = super().__str__()
        if self.hint:
            return f"[{self.code}] {base} | Hint: {self.hint}"
        return f"[{self.code}] {base}"

class ConfigError(EnvError):
    code = "CFG_BAD"

class SetupError(EnvError):
    code = "SETUP_BAD"

class StepError(EnvError):
    code = "STEP_BAD"

class PlacementInfeasibleError(EnvError):
    code = "PLACE_INFEASIBLE"
