"""
User account models
"""

from sqlalchemy import Boolean, Column, Integer, String

from .base import Base, TimestampMixin


class UserDB(Base, TimestampMixin):
    """
    Cuenta de usuario.

    Attributes:
        id: identificador numérico
        name: nombre visible
        email: email único, guardado en minúsculas
        password_hash: hash bcrypt de la contraseña
        is_admin: acceso a las operaciones de administración
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<UserDB(id={self.id}, email='{self.email}', is_admin={self.is_admin})>"
