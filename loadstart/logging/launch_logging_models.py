from .models import Entry, LogLevel


class ReadinessInfo(Entry, kw_only=True):
    job: str
    namespace: str
    running: int
    expected: int
    level: LogLevel = LogLevel.INFO

class ReadinessError(Entry, kw_only=True):
    job: str
    namespace: str
    error: str
    level: LogLevel = LogLevel.ERROR

class ServiceProbeDebug(Entry, kw_only=True):
    service: str
    namespace: str
    url: str
    attempt: int
    level: LogLevel = LogLevel.DEBUG

class ServiceProbeInfo(Entry, kw_only=True):
    service: str
    namespace: str
    url: str
    attempts: int
    level: LogLevel = LogLevel.INFO

class ServiceProbeError(Entry, kw_only=True):
    service: str
    namespace: str
    url: str
    attempts: int
    error: str
    level: LogLevel = LogLevel.ERROR

class LaunchDebug(Entry, kw_only=True):
    job: str
    namespace: str
    stage: str
    level: LogLevel = LogLevel.DEBUG

class LaunchInfo(Entry, kw_only=True):
    job: str
    namespace: str
    stage: str
    level: LogLevel = LogLevel.INFO

class LaunchWarning(Entry, kw_only=True):
    job: str
    namespace: str
    stage: str
    error: str
    level: LogLevel = LogLevel.WARN

class LaunchFailure(Entry, kw_only=True):
    job: str
    namespace: str
    stage: str
    error: str
    level: LogLevel = LogLevel.ERROR
