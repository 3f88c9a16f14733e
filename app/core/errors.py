"""Domain errors raised by services and mapped to HTTP responses in app.main."""


class OverloadError(Exception):
    """Base for all domain errors."""

    status_code = 400

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__


class InvalidArgument(OverloadError, ValueError):
    """Malformed numeric input to a calculator or the decision engine."""

    status_code = 422


class PlanNotFound(OverloadError):
    status_code = 404

    def __init__(self, message: str = "Plan not found"):
        super().__init__(message)


class ExerciseNotFound(OverloadError):
    status_code = 404

    def __init__(self, message: str = "Exercise not found"):
        super().__init__(message)


class NoExercisesInPlan(OverloadError):
    status_code = 409

    def __init__(self, message: str = "No exercises in plan"):
        super().__init__(message)


class NoActiveWorkout(OverloadError):
    status_code = 409

    def __init__(self, message: str = "No active workout"):
        super().__init__(message)


class WorkoutAlreadyActive(OverloadError):
    status_code = 409

    def __init__(self, message: str = "A workout is already active"):
        super().__init__(message)


class AuthenticationError(OverloadError):
    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)
