from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.auth import Identity
from app.core.dependencies import get_db, get_identity
from app.schemas import account as schemas_account
from app.schemas.common import Envelope
from app.services.account_service import AccountService

router = APIRouter()


@router.post("/sync", response_model=Envelope[schemas_account.Account])
def sync_account(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    """Mirror the signed-in user into the account table. Called on every sign-in."""
    account = AccountService(db).upsert(
        schemas_account.AccountCreate(
            user_id=identity.user_id,
            name=identity.name,
            email=identity.email or "",
            image=identity.image,
        )
    )
    return {"success": True, "data": account, "message": "User synced successfully"}
