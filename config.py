import os
from dotenv import load_dotenv
from db import MySQLDatabase, SQLiteDatabase

load_dotenv()

def make_database(settings):
    backend = settings['DATABASE_BACKEND']
    if backend == 'sqlite':
        return SQLiteDatabase(settings['SQLITE_PATH'])
    if backend == 'mysql':
        return MySQLDatabase(
            pool_name="milk_pool",
            pool_size=settings['MYSQL_POOL_SIZE'],
            host=settings['MYSQL_HOST'],
            user=settings['MYSQL_USER'],
            password=settings['MYSQL_PASSWORD'],
            database=settings['MYSQL_DATABASE']
        )
    raise ValueError(f"Unknown DATABASE_BACKEND: {backend!r}")

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY')
    DATABASE_BACKEND = os.getenv('DATABASE_BACKEND', 'sqlite').lower()
    SQLITE_PATH = os.getenv('SQLITE_PATH', 'milk_tracker.db')
    MYSQL_HOST = os.getenv('MYSQL_HOST')
    MYSQL_USER = os.getenv('MYSQL_USER')
    MYSQL_PASSWORD = os.getenv('MYSQL_PASSWORD')
    MYSQL_DATABASE = os.getenv('MYSQL_DATABASE', 'milk_tracker')
    MYSQL_POOL_SIZE = int(os.getenv('MYSQL_POOL_SIZE', '5'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    @staticmethod
    def init_db(app):
        app.db = make_database(app.config)
