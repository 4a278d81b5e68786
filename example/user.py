"""
Example declaration.

Generate with:
    python -m model_maker --file example/user.py --struct User --table user --sql example/user.sql
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel


class User(BaseModel):
    id: Annotated[Optional[int], 'db:"id" gen:"bigint,autoincrement,notnull,primary"'] = None
    name: Annotated[str, 'db:"name" gen:"varchar(512),notnull"']
    created_at: Annotated[datetime, 'db:"dt_created" gen:"datetime,notnull"']
    last_login_at: Annotated[datetime, 'db:"dt_last_login" gen:"datetime,notnull"']
    login: Annotated[str, 'db:"login" gen:"varchar(512),notnull,unique,index"']
    pwd_hash: Annotated[str, 'db:"pwd_hash" gen:"varchar(512),notnull"']
    id_group: Annotated[int, 'db:"id_group" gen:"bigint,notnull,default(1)"'] = 1
    session_token: Annotated[str, 'db:"-"'] = ""
