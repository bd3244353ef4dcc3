"""
Centralized logging service for Showcase.
Stores admin activity and backend failures in sqlite and mirrors them to the console logger.
"""

import json
import logging
import traceback
from datetime import datetime
from flask import request, has_request_context
from .database import Database
from .config import Config, get_config_value

logger = logging.getLogger(__name__)

_SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS app_logs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        timestamp TEXT NOT NULL,
        level TEXT NOT NULL,
        source TEXT NOT NULL,
        message TEXT NOT NULL,
        details TEXT,
        ip_address TEXT,
        user_agent TEXT,
        request_path TEXT
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_logs_timestamp ON app_logs(timestamp DESC)",
    "CREATE INDEX IF NOT EXISTS idx_logs_source ON app_logs(source)",
]


class LoggingService:
    """Centralized logging service for application-wide logging"""

    @staticmethod
    def _log_db():
        return get_config_value('LOG_DB', Config.LOG_DB)

    @staticmethod
    def _get_request_context():
        """Extract request context information"""
        if not has_request_context():
            return None, None, None

        ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
        if ip_address and ',' in ip_address:
            ip_address = ip_address.split(',')[0].strip()

        return ip_address, request.headers.get('User-Agent', ''), request.path

    @staticmethod
    def log(level, source, message, details=None):
        """
        Log a message to the console and the activity database

        Args:
            level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            source (str): Source component (auth, achievements, sections, ...)
            message (str): Main log message
            details (str/dict): Additional details (JSON-encoded if dict)
        """
        level = level.upper()
        logger.log(getattr(logging, level, logging.INFO), '[%s] %s', source, message)

        if isinstance(details, dict):
            details = json.dumps(details, indent=2, default=str)

        try:
            path = LoggingService._log_db()
            Database.ensure_schema(path, _SCHEMA)
            ip_address, user_agent, request_path = LoggingService._get_request_context()

            with Database.connect(path) as conn:
                cursor = conn.cursor()
                cursor.execute("""
                    INSERT INTO app_logs
                    (timestamp, level, source, message, details, ip_address, user_agent, request_path)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """, (
                    datetime.now().isoformat(), level, source, message, details,
                    ip_address, user_agent, request_path
                ))
                conn.commit()
        except Exception as e:
            # The console line above is the fallback
            logger.warning('Logging service error: %s', e)

    @staticmethod
    def info(source, message, details=None):
        LoggingService.log('INFO', source, message, details)

    @staticmethod
    def warning(source, message, details=None):
        LoggingService.log('WARNING', source, message, details)

    @staticmethod
    def error(source, message, details=None):
        LoggingService.log('ERROR', source, message, details)

    @staticmethod
    def log_user_action(source, action, details=None):
        """Log admin actions (sign-in, create, delete, ...)"""
        LoggingService.info(source, f"User action: {action}", details)

    @staticmethod
    def log_error_with_traceback(source, error, details=None):
        """Log error with full traceback"""
        error_details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': traceback.format_exc()
        }
        if details:
            error_details['additional_details'] = details

        LoggingService.error(source, f"Exception occurred: {type(error).__name__}", error_details)

    @staticmethod
    def recent(limit=20, source=None):
        """Return the newest log entries as dicts, newest first."""
        try:
            path = LoggingService._log_db()
            Database.ensure_schema(path, _SCHEMA)
            with Database.connect(path) as conn:
                cursor = conn.cursor()
                if source:
                    cursor.execute("""
                        SELECT timestamp, level, source, message FROM app_logs
                        WHERE source = ? ORDER BY id DESC LIMIT ?
                    """, (source, limit))
                else:
                    cursor.execute("""
                        SELECT timestamp, level, source, message FROM app_logs
                        ORDER BY id DESC LIMIT ?
                    """, (limit,))
                return [
                    {'timestamp': row[0], 'level': row[1], 'source': row[2], 'message': row[3]}
                    for row in cursor.fetchall()
                ]
        except Exception as e:
            logger.warning('Could not read activity log: %s', e)
            return []
