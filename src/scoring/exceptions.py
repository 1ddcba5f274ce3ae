"""Error taxonomy for token analysis.

Each error maps to an HTTP status so the API layer can surface it verbatim.
"""


class ScoreError(Exception):
    status_code: int = 500
    default_message: str = "Failed to analyze token. Make sure this is a Pump.fun token."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ScoreError):
    status_code = 400
    default_message = "Invalid mint address format"


class NotFoundError(ScoreError):
    status_code = 404
    default_message = "Token not found on Pump.fun. Only Pump.fun tokens are supported."


class UnsupportedAssetError(ScoreError):
    status_code = 400
    default_message = "This token is not from Pump.fun. Only Pump.fun tokens are supported."


class UpstreamError(ScoreError):
    pass
