# productstore/repos/product_repo.py
from typing import Any, Dict, List

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection


class ProductRepo:
    """Single-document operations on the products collection."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def find(self, query: Dict[str, Any], skip: int, limit: int) -> List[Dict[str, Any]]:
        cursor = self.collection.find(query).sort("_id", ASCENDING).skip(skip).limit(limit)
        return list(cursor)

    def count(self, query: Dict[str, Any]) -> int:
        return self.collection.count_documents(query)

    def get(self, product_id: ObjectId) -> Dict[str, Any] | None:
        return self.collection.find_one({"_id": product_id})

    def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        document = dict(document)
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    def update(self, product_id: ObjectId, fields: Dict[str, Any]) -> Dict[str, Any] | None:
        return self.collection.find_one_and_update(
            {"_id": product_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )

    def delete(self, product_id: ObjectId) -> Dict[str, Any] | None:
        return self.collection.find_one_and_delete({"_id": product_id})

    def is_empty(self) -> bool:
        return self.collection.find_one({}) is None
