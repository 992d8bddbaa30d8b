"""
Custom exception types for the toy robot.

User mistakes are reported as status strings; these are reserved for broken
call contracts that correct dispatch never produces.
"""


class RobotContractError(RuntimeError):
    """Robot operation called in a state or with an argument it does not accept."""

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(f"Robot contract violated: {message}")

    def __str__(self):
        return f"Robot contract violated: {self.original_message}"
