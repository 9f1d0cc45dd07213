# beerstock/crud/beer_crud.py
# 커밋은 서비스에서 작업 단위로 한 번만 수행함 (여기서는 flush까지만)
from typing import List, Optional

from sqlalchemy.orm import Session
from beerstock.models.beer_model import Beer


# READ-ALL 전체 맥주 조회
def get_beers(db: Session) -> List[Beer]:
    return db.query(Beer).order_by(Beer.id).all()


# READ 단일 맥주 조회 (ID 기준)
def get_beer_by_id(db: Session, beer_id: int) -> Optional[Beer]:
    return db.query(Beer).filter(Beer.id == beer_id).first()


# READ 단일 맥주 조회 (이름 기준)
def get_beer_by_name(db: Session, name: str) -> Optional[Beer]:
    return db.query(Beer).filter(Beer.name == name).first()


# SAVE 생성 또는 수정 (upsert)
def save_beer(db: Session, beer: Beer) -> Beer:
    db_beer = db.merge(beer) if beer.id is not None else beer
    db.add(db_beer)
    db.flush()
    return db_beer


# DELETE
def delete_beer(db: Session, beer_id: int) -> None:
    db.query(Beer).filter(Beer.id == beer_id).delete()
    db.flush()
