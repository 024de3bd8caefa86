from typing import List

from sqlalchemy.orm import Session

from storefront.models import User, Wish


def find_user_wishes(db: Session, user_id: int) -> List[Wish]:
    """Full wish objects of a user, in the order the user collected them."""
    user = db.get(User, user_id)
    if user is None:
        return []
    return list(user.wishes)
