# server/models/user.py

from pydantic import BaseModel, ConfigDict, Field

from server.core.utils import utc_now_iso


# -------------------------------
# User Model
# -------------------------------

class UserRecord(BaseModel):
    """
    One entry of users.json, keyed by username in the enclosing mapping.
    Stores the bcrypt hash, the creation time and the admin flag.
    """
    model_config = ConfigDict(populate_by_name=True)

    password_hash: str = Field(alias="passwordHash")
    created_at: str = Field(default_factory=utc_now_iso, alias="createdAt")
    is_admin: bool = Field(default=False, alias="isAdmin")

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)

    def public(self) -> dict:
        """Listing view: everything except the password hash."""
        return {"createdAt": self.created_at, "isAdmin": self.is_admin}
