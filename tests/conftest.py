import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.core.auth import hash_password
from app.db.mongodb import get_db, init_mongo_indexes
from app.main import app
from app.services.mongo_service import utcnow

DESCRIPTION = "A twelve week placement working on real projects."


@pytest.fixture
def db():
    # In-memory MongoDB with the production indexes
    database = mongomock.MongoClient().db["studyconnect_test"]
    init_mongo_indexes(database)
    return database


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def student(db):
    now = utcnow()
    doc = {
        "email": "ana@uni.edu",
        "password": hash_password("secret123"),
        "firstName": "Ana",
        "lastName": "Silva",
        "phone": "555-0100",
        "createdAt": now,
        "updatedAt": now,
    }
    doc["_id"] = db["students"].insert_one(doc).inserted_id
    return doc


@pytest.fixture
def organization(db):
    now = utcnow()
    doc = {
        "orgName": "Acme",
        "email": "jobs@acme.org",
        "phone": "",
        "password": hash_password("orgpass1"),
        "createdAt": now,
        "updatedAt": now,
    }
    doc["_id"] = db["organizations"].insert_one(doc).inserted_id
    return doc


@pytest.fixture
def post_payload(organization):
    def build(**overrides):
        payload = {
            "orgId": str(organization["_id"]),
            "orgName": organization["orgName"],
            "title": "Summer Intern",
            "type": "Internship",
            "description": DESCRIPTION,
        }
        payload.update(overrides)
        return payload
    return build


@pytest.fixture
def create_post(client, post_payload):
    def create(**overrides):
        response = client.post("/api/posts", json=post_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()
    return create


@pytest.fixture
def other_org_id():
    return str(ObjectId())
