"""User-facing error messages.

메시지 ID와 기본(영문) 문구입니다. 로케일별 번역은 MessageCatalog가 제공합니다.
"""

from apps.storefront.application.common.messages import Message

MSG_UNAUTHORIZED = Message("api.unauthorized", "token is invalid or has already expired")
MSG_INVALID_CREDENTIALS = Message("api.invalid_credentials", "invalid credentials")
MSG_FORBIDDEN = Message("api.forbidden", "you do not have permission to perform this action")
MSG_USER_EXISTS = Message("api.user.already_exists", "user with this email or username already exists")
MSG_INVALID_PASSWORD = Message("api.user.invalid_password", "invalid password provided")
MSG_NO_CHANGES = Message("api.no_changes", "no changes provided")
MSG_SIGNING = Message("api.token.signing_error", "could not create auth tokens")
MSG_SESSION_STORE = Message("api.session.unavailable", "session store is temporarily unavailable")
MSG_DATABASE = Message("api.database.unavailable", "could not access the database")
MSG_FILE_STORAGE = Message("api.file.storage_error", "could not store the file")
MSG_UNSUPPORTED_FILE = Message("api.file.unsupported_type", "unsupported file type")
MSG_FILE_TOO_LARGE = Message("api.file.too_large", "file is too large")
MSG_INVALID_ACTION_TOKEN = Message("api.user.invalid_action_token", "token is invalid or has expired")
