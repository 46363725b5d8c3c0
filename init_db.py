import logging
from config import Config, make_database

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    'default_rate': '60',
    'theme': 'midnight',
    'pin': '2580',
}

SCHEMA = [
    """CREATE TABLE IF NOT EXISTS entries (
        id INTEGER PRIMARY KEY AUTO_INCREMENT,
        date VARCHAR(10) UNIQUE,
        quantity DOUBLE,
        rate DOUBLE
    )""",
    """CREATE TABLE IF NOT EXISTS payments (
        id INTEGER PRIMARY KEY AUTO_INCREMENT,
        date VARCHAR(10),
        amount DOUBLE
    )""",
    """CREATE TABLE IF NOT EXISTS settings (
        `key` VARCHAR(64) PRIMARY KEY,
        value TEXT
    )""",
]

def init_db(database):
    """Create the three tables and seed any missing settings. Safe to run repeatedly."""
    with database.transaction() as tx:
        for statement in SCHEMA:
            tx.execute(statement)
        for key, value in DEFAULT_SETTINGS.items():
            tx.execute("INSERT IGNORE INTO settings (`key`, value) VALUES (%s, %s)", (key, value))
    database.schema_ready = True
    logger.info("Database schema ready")

if __name__ == "__main__":
    logging.basicConfig(level=Config.LOG_LEVEL, format="%(levelname)s: %(message)s")
    init_db(make_database(vars(Config)))
