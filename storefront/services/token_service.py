import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import JWTError, jwt

from storefront.config.settings import Settings
from storefront.core.domain import AuthenticationException

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class TokenIdentity:
    """Caller identity carried by a verified access token."""

    user_id: int
    is_admin: bool = False


class TokenService:
    """
    Servicio para gestionar tokens JWT y contraseñas
    """

    def __init__(self, settings: Settings):
        self.settings = settings

        # Configuración JWT
        self.SECRET_KEY = settings.JWT_SECRET_KEY
        self.ALGORITHM = settings.JWT_ALGORITHM
        self.ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verifica si la contraseña coincide con el hash"""
        password_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        hash_bytes = hashed_password.encode("utf-8")
        try:
            return bcrypt.checkpw(password_bytes, hash_bytes)
        except ValueError:
            # Stored value is not a bcrypt hash
            logger.warning("Password check against a malformed hash")
            return False

    def hash_password(self, password: str) -> str:
        """Genera un hash para la contraseña"""
        password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        salt = bcrypt.gensalt(rounds=self.settings.BCRYPT_ROUNDS)
        hash_bytes = bcrypt.hashpw(password_bytes, salt)
        return hash_bytes.decode("utf-8")

    def create_access_token(self, data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        """
        Crea un token JWT de acceso

        Args:
            data: Datos a incluir en el token
            expires_delta: Tiempo de expiración (opcional)

        Returns:
            Token JWT codificado
        """
        to_encode = data.copy()

        if expires_delta:
            expire = datetime.now(timezone.utc) + expires_delta
        else:
            expire = datetime.now(timezone.utc) + timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES)

        to_encode.update({"exp": expire, "iat": datetime.now(timezone.utc), "token_type": "access"})
        return jwt.encode(to_encode, self.SECRET_KEY, algorithm=self.ALGORITHM)

    def create_user_token(self, user_id: int, is_admin: bool) -> str:
        return self.create_access_token({"sub": str(user_id), "is_admin": is_admin})

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Decodifica un token JWT

        Raises:
            AuthenticationException: Firma inválida o token expirado
        """
        try:
            return jwt.decode(token, self.SECRET_KEY, algorithms=[self.ALGORITHM])
        except JWTError as e:
            raise AuthenticationException("Invalid or expired token") from e

    def get_identity(self, token: str) -> TokenIdentity:
        """
        Resolve the caller carried by an access token.

        Raises:
            AuthenticationException: Token invalid, expired or not an access token
        """
        payload = self.decode_token(token)
        if payload.get("token_type") != "access":
            raise AuthenticationException("Invalid token type")
        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError) as e:
            raise AuthenticationException("Invalid token subject") from e
        return TokenIdentity(user_id=user_id, is_admin=bool(payload.get("is_admin", False)))
