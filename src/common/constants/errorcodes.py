from src.common.constants.database import CONNECTION_FAILED_PREFIX

ERR_INVALID_PORT = 200
ERR_CONNECTION_FAILED = 201
ERR_NOT_INITIALIZED = 202


ERROR_MESSAGES = {
    ERR_INVALID_PORT: "Invalid database port: {value!r} (expected an integer between {min_port} and {max_port}).",
    ERR_CONNECTION_FAILED: CONNECTION_FAILED_PREFIX + "{reason}",
    ERR_NOT_INITIALIZED: "Database connection has not been initialized. Call init_connection() at startup.",
}
