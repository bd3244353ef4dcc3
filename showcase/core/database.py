import os
import sqlite3
import threading


class Database:
    # Serialises schema creation across worker threads
    _lock = threading.Lock()
    _initialised = set()

    @staticmethod
    def connect(path):
        db_dir = os.path.dirname(path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
        return sqlite3.connect(path)

    @classmethod
    def ensure_schema(cls, path, statements):
        """
        Run CREATE statements once per database file; a removed file is recreated.
        """
        with cls._lock:
            if path in cls._initialised and os.path.exists(path):
                return
            with cls.connect(path) as conn:
                cursor = conn.cursor()
                for statement in statements:
                    cursor.execute(statement)
                conn.commit()
            cls._initialised.add(path)
