CV = {
    "email": "ana@uni.edu",
    "firstName": "Ana",
    "lastName": "Silva",
    "phone": "555-0100",
    "address": "12 College Rd",
    "education": "BSc Computer Science",
    "skills": "Python, SQL",
    "experience": "Lab assistant",
    "projects": "Course planner",
    "certifications": "AWS CCP",
}


def test_save_cv(client, db, student):
    response = client.post("/api/cv", json=CV)
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "CV saved successfully!"
    assert body["cv"] == CV

    stored = db["students"].find_one({"email": "ana@uni.edu"})
    assert stored["skills"] == "Python, SQL"
    assert stored["firstName"] == "Ana"


def test_save_cv_trims_fields(client, db, student):
    response = client.post("/api/cv", json={**CV, "firstName": "  Ana  ", "skills": " Python "})
    assert response.status_code == 200
    assert response.json()["cv"]["firstName"] == "Ana"
    assert db["students"].find_one({"email": "ana@uni.edu"})["skills"] == "Python"


def test_save_cv_clears_omitted_optional_fields(client, db, student):
    client.post("/api/cv", json=CV)

    minimal = {key: CV[key] for key in ("email", "firstName", "lastName", "phone")}
    response = client.post("/api/cv", json=minimal)
    assert response.status_code == 200
    cv = response.json()["cv"]
    for field in ("address", "education", "skills", "experience", "projects", "certifications"):
        assert cv[field] == ""

    stored = db["students"].find_one({"email": "ana@uni.edu"})
    assert stored["education"] == ""
    assert stored["certifications"] == ""


def test_save_cv_requires_identity_fields(client, student):
    response = client.post("/api/cv", json={**CV, "phone": ""})
    assert response.status_code == 400
    assert response.json() == {"error": "Email, First Name, Last Name, and Phone are required."}


def test_save_cv_never_creates_a_student(client, db):
    response = client.post("/api/cv", json={**CV, "email": "missing@x.com"})
    assert response.status_code == 400
    assert response.json() == {"error": "Student not found."}
    assert db["students"].count_documents({}) == 0


def test_save_cv_keeps_password(client, db, student):
    client.post("/api/cv", json=CV)
    assert db["students"].find_one({"email": "ana@uni.edu"})["password"] == student["password"]


def test_get_cv(client, student):
    client.post("/api/cv", json=CV)

    response = client.get("/api/cv", params={"email": "ana@uni.edu"})
    assert response.status_code == 200
    cv = response.json()["cv"]
    assert cv["_id"] == str(student["_id"])
    assert cv["education"] == "BSc Computer Science"
    assert "password" not in cv
    assert "createdAt" not in cv


def test_get_cv_before_any_save(client, student):
    response = client.get("/api/cv", params={"email": "ana@uni.edu"})
    assert response.status_code == 200
    cv = response.json()["cv"]
    assert cv["firstName"] == "Ana"
    assert "password" not in cv


def test_get_cv_requires_email(client):
    response = client.get("/api/cv")
    assert response.status_code == 400
    assert response.json() == {"error": "Email is required."}


def test_get_cv_unknown_student(client):
    response = client.get("/api/cv", params={"email": "missing@x.com"})
    assert response.status_code == 400
    assert response.json() == {"error": "Student not found."}


def test_save_cv_with_padded_email(client, db, student):
    response = client.post("/api/cv", json={**CV, "email": "  ana@uni.edu "})
    assert response.status_code == 200
    assert db["students"].find_one({"email": "ana@uni.edu"})["skills"] == "Python, SQL"


def test_get_cv_with_padded_email(client, student):
    response = client.get("/api/cv", params={"email": " ana@uni.edu  "})
    assert response.status_code == 200
    assert response.json()["cv"]["email"] == "ana@uni.edu"


def test_get_cv_blank_email_is_required(client):
    response = client.get("/api/cv", params={"email": "   "})
    assert response.status_code == 400
    assert response.json() == {"error": "Email is required."}
