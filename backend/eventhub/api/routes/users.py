from typing import List
from fastapi import APIRouter, Depends

from eventhub.api.deps import get_store
from eventhub.db.store import Store
from eventhub.schemas.auth import UserOut

router = APIRouter()

@router.get("/users", response_model=List[UserOut])
def list_users(store: Store = Depends(get_store)):
    # response_model keeps password hashes out of the payload
    return store.list_users()
