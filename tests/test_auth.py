# tests/test_auth.py
class TestRegister:
    def test_register(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json={"email": "lim@hanbit.es.kr", "password": "s3cretpass", "name": "Lim"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "lim@hanbit.es.kr"
        assert "password_hash" not in body

    def test_duplicate_email(self, client, test_teacher):
        response = client.post(
            "/api/v1/auth/register",
            json={"email": test_teacher.email, "password": "s3cretpass", "name": "Park"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Email already registered"}

    def test_short_password(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json={"email": "lim@hanbit.es.kr", "password": "short", "name": "Lim"},
        )

        assert response.status_code == 400


class TestLogin:
    def test_json_login(self, client, test_teacher):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": test_teacher.email, "password": "password123"},
        )

        assert response.status_code == 200
        token = response.json()["access_token"]
        me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["name"] == "Park"

    def test_form_login(self, client, test_teacher):
        response = client.post(
            "/api/v1/auth/token",
            data={"username": test_teacher.email, "password": "password123"},
        )

        assert response.status_code == 200
        assert response.json()["token_type"] == "bearer"

    def test_wrong_password(self, client, test_teacher):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": test_teacher.email, "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_student_token_is_not_a_teacher(self, client, student_headers):
        response = client.get("/api/v1/auth/me", headers=student_headers)

        assert response.status_code == 401

    def test_deleted_teacher(self, client, db_session, test_teacher, teacher_headers):
        db_session.delete(test_teacher)
        db_session.commit()

        response = client.get("/api/v1/auth/me", headers=teacher_headers)

        assert response.status_code == 401
