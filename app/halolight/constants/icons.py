from enum import Enum


class MenuIcon(str, Enum):
    DASHBOARD = "dashboard"
    USERS = "users"
    USER = "user"
    SHIELD = "shield"
    FILE_TEXT = "file-text"
    FOLDER = "folder"
    BAR_CHART = "bar-chart"
    MAIL = "mail"
    CALENDAR = "calendar"
    BELL = "bell"
    SETTINGS = "settings"
