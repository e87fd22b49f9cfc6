"""
Accounts mirror users of the external identity provider. They are upserted
on every sign-in sync; ``role`` is only changed by ``set_role``.
"""
from typing import Optional

from sqlalchemy.orm import Session

from app.crud import mutations
from app.models.account import Account
from app.schemas.account import AccountCreate, AccountUpdate


class AccountService:
    def __init__(self, db: Session):
        self.db = db

    def find_by_user_id(self, user_id: str) -> Optional[Account]:
        return self.db.query(Account).filter(Account.user_id == user_id).first()

    def find_by_id(self, account_id: str) -> Optional[Account]:
        return self.db.get(Account, account_id)

    def create(self, data: AccountCreate) -> Account:
        values = data.model_dump()
        values["role"] = values.get("role") or "user"
        return mutations.insert(self.db, Account, values)

    def update_by_user_id(self, user_id: str, data: AccountUpdate) -> Optional[Account]:
        account = self.find_by_user_id(user_id)
        if account is None:
            return None
        return mutations.update(self.db, Account, account.id, data.model_dump(exclude_unset=True))

    def upsert(self, data: AccountCreate) -> Account:
        """Create the account, or refresh its profile fields. Never touches the role."""
        if self.find_by_user_id(data.user_id):
            return self.update_by_user_id(
                data.user_id,
                AccountUpdate(name=data.name, email=data.email, image=data.image),
            )
        return self.create(data)

    def set_role(self, user_id: str, role: str) -> Optional[Account]:
        return self.update_by_user_id(user_id, AccountUpdate(role=role))
