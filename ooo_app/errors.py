class NotApplicable(Exception):
    """The event is correctly ignored; the run ends neutrally."""


class ConfigError(RuntimeError):
    pass


class OooFailure(ValueError):
    """Applicable event that cannot be carried out. Message is user-facing."""


class MissingDates(OooFailure):
    pass


class LoginNotFound(OooFailure):
    pass


class DateRangeNotFound(OooFailure):
    pass


class EmptyDateRange(OooFailure):
    pass


class WeekendOnlyRange(OooFailure):
    pass
