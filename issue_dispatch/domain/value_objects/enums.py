"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class IssueStatus(str, Enum):
    REPORTED = "Reported"
    PENDING = "Pending"
    ASSIGNED = "Assigned"


class DutyStatus(str, Enum):
    ON_DUTY = "On Duty"
    ASSIGNED = "Assigned"
    OFF_DUTY = "Off Duty"


class Department(str, Enum):
    ROADS = "Roads"
    SANITATION = "Sanitation"
    ELECTRICAL = "Electrical"
    SECURITY = "Security"
    GENERAL = "General"


class PushProvider(str, Enum):
    FCM = "fcm"
    EXPO = "expo"
