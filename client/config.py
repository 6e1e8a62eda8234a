# client/config.py
import os
from dotenv import load_dotenv
load_dotenv()

# Base path for first-column detail links, e.g. "/indicators"
DETAIL_PATH = os.getenv("DETAIL_PATH", "")
LINK_FIRST_COLUMN = os.getenv("LINK_FIRST_COLUMN", "false").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("RECORDTABLE_LOG_LEVEL", "INFO")

# Column config used until the user changes it on the Load page
DEFAULT_HEADERS = ["Proyecto", "Operacion", "Nombre", "Jefe de proyecto", "Date", "Id"]
DEFAULT_KEYS    = ["code", "loanNumber", "title", "field7", "field8", "id"]
