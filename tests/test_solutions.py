# tests/test_solutions.py
import uuid

import pytest

from safepin.models import SafetyPin

SOLUTIONS_URL = "/api/v1/solutions"


@pytest.fixture
def safety_pin(db_session, test_student):
    pin = SafetyPin(
        class_id=test_student.class_id,
        student_id=test_student.id,
        location_type="school",
        category="violence_prevention",
        title="Dark corner behind the gym",
    )
    db_session.add(pin)
    db_session.commit()
    db_session.refresh(pin)
    return pin


def _solution_body(pin, student, **overrides):
    body = {
        "safety_pin_id": str(pin.id),
        "student_id": str(student.id),
        "type": "text",
        "content": "Walk there with a friend",
    }
    body.update(overrides)
    return body


class TestCreateSolution:
    def test_text_solution(self, client, safety_pin, test_student, student_headers):
        response = client.post(
            SOLUTIONS_URL, json=_solution_body(safety_pin, test_student), headers=student_headers
        )

        assert response.status_code == 201
        solution = response.json()["solution"]
        assert solution["type"] == "text"
        assert solution["content"] == "Walk there with a friend"
        assert solution["students"] == {"name": "Kim"}

    def test_drawing_solution_with_uploaded_url(
        self, client, safety_pin, test_student, student_headers
    ):
        response = client.post(
            SOLUTIONS_URL,
            json=_solution_body(
                safety_pin,
                test_student,
                type="drawing",
                content="https://cdn.test/safety-pins/1700000000000-drawing.png",
            ),
            headers=student_headers,
        )

        assert response.status_code == 201
        assert response.json()["solution"]["type"] == "drawing"

    def test_image_solution_needs_url(self, client, safety_pin, test_student, student_headers):
        response = client.post(
            SOLUTIONS_URL,
            json=_solution_body(safety_pin, test_student, type="image", content="a photo"),
            headers=student_headers,
        )

        assert response.status_code == 400

    def test_blank_content(self, client, safety_pin, test_student, student_headers):
        response = client.post(
            SOLUTIONS_URL,
            json=_solution_body(safety_pin, test_student, content="  "),
            headers=student_headers,
        )

        assert response.status_code == 400

    def test_unknown_type(self, client, safety_pin, test_student, student_headers):
        response = client.post(
            SOLUTIONS_URL,
            json=_solution_body(safety_pin, test_student, type="video"),
            headers=student_headers,
        )

        assert response.status_code == 400

    def test_unknown_pin(self, client, test_student, student_headers):
        response = client.post(
            SOLUTIONS_URL,
            json={
                "safety_pin_id": str(uuid.uuid4()),
                "student_id": str(test_student.id),
                "type": "text",
                "content": "hello",
            },
            headers=student_headers,
        )

        assert response.status_code == 404

    def test_cannot_post_as_another_student(
        self, client, safety_pin, test_student, other_student, student_headers
    ):
        response = client.post(
            SOLUTIONS_URL,
            json=_solution_body(safety_pin, other_student),
            headers=student_headers,
        )

        assert response.status_code == 403

    def test_requires_student_session(self, client, safety_pin, test_student):
        response = client.post(SOLUTIONS_URL, json=_solution_body(safety_pin, test_student))

        assert response.status_code == 401


class TestListSolutions:
    def test_newest_first(self, client, safety_pin, test_student, student_headers):
        for content in ("one", "two", "three"):
            client.post(
                SOLUTIONS_URL,
                json=_solution_body(safety_pin, test_student, content=content),
                headers=student_headers,
            )

        response = client.get(SOLUTIONS_URL, params={"safety_pin_id": str(safety_pin.id)})

        assert response.status_code == 200
        assert [s["content"] for s in response.json()["solutions"]] == ["three", "two", "one"]

    def test_unknown_pin_is_empty(self, client):
        response = client.get(SOLUTIONS_URL, params={"safety_pin_id": str(uuid.uuid4())})

        assert response.json() == {"solutions": []}

    def test_pin_id_is_required(self, client):
        response = client.get(SOLUTIONS_URL)

        assert response.status_code == 400
