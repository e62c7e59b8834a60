import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
INPUT_DIR = BASE_DIR / os.getenv("INPUT_DIR", "input")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Filename Configuration ---
ITEMS_FILENAME = os.getenv("ITEMS_FILENAME", "items.csv")
REPORT_FILENAME_BASE = os.getenv("REPORT_FILENAME_BASE", "inventory_report")

# --- Run Configuration ---
DEFAULT_DAYS = int(os.getenv("DEFAULT_DAYS", "2"))
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "false").lower() in ("1", "true", "yes")

# --- Webhook ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")

# --- Default Stock ---
# Used when no seed file is present in INPUT_DIR.
# (name, sell_in, quality)
DEFAULT_INVENTORY = [
    ("+5 Dexterity Vest", 10, 20),
    ("Aged Brie", 2, 0),
    ("Elixir of the Mongoose", 5, 7),
    ("Sulfuras, Hand of Ragnaros", 0, 80),
    ("Sulfuras, Hand of Ragnaros", -1, 80),
    ("Backstage passes to a TAFKAL80ETC concert", 15, 20),
    ("Backstage passes to a TAFKAL80ETC concert", 10, 49),
    ("Backstage passes to a TAFKAL80ETC concert", 5, 49),
    ("Conjured", 3, 6),
]
