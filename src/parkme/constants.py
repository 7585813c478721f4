from pathlib import Path

APP_NAME = "parkme"

DEFAULT_PROJECT_NAME = "park-me-app"

REPOSITORY_URL = "https://github.com/IT24102532/parkingManagement.git"
REPOSITORY_BRANCH = "master"

APP_DIR_NAME = "app"
DATA_DIR_NAME = "data"
CONFIG_RELATIVE_PATH = Path("src") / "main" / "resources" / "config.properties"

ASSETS_DIR = Path(__file__).resolve().parent / "assets"
TEMPLATES_DIR_NAME = "templates"
CONFIG_TEMPLATE_NAME = "config.properties.template"

DATA_FILES = (
    "users.json",
    "bookings.json",
    "transactions.json",
    "parkingSlots.json",
)

TOMCAT_INSTALL_URL = "https://tomcat.apache.org/download-90.cgi"
