from __future__ import annotations

from fieldops.auth import create_access_token


def _create_job_order(client, auth_headers, payload: dict) -> dict:
    response = client.post("/companies/c1/job-orders", json=payload, headers=auth_headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "healthy"}


def test_requests_without_token_are_rejected(client, tenant) -> None:
    response = client.get("/companies/c1/tasks")

    assert response.status_code in (401, 403)


def test_invalid_token_is_rejected(client, tenant) -> None:
    response = client.get("/companies/c1/tasks", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


def test_non_member_cannot_access_company(client, tenant) -> None:
    token = create_access_token("outsider", "outsider@other.com")

    response = client.get("/companies/c1/tasks", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403


def test_me_lists_companies(client, auth_headers) -> None:
    body = client.get("/auth/me", headers=auth_headers).json()

    assert body["id"] == "owner"
    assert [company["id"] for company in body["companies"]] == ["c1"]


def test_create_job_order_and_read_task(client, auth_headers, make_payload) -> None:
    result = _create_job_order(client, auth_headers, make_payload())

    assert set(result) == {"taskId", "workingOrderId", "taskDetailId"}

    task = client.get(f"/companies/c1/tasks/{result['taskId']}", headers=auth_headers).json()
    assert task["status"] == "open"
    assert task["workingOrderId"] == result["workingOrderId"]
    assert task["taskDetailId"] == result["taskDetailId"]
    assert task["categoryId"] is None
    assert task["categoryName"] == "Maintenance"
    assert task["instructionsCompleted"] == [False, False]
    assert task["scheduledDate"] is None
    assert [(a["userId"], a["assignmentType"]) for a in task["assignments"]] == [
        ("u1", "individual")
    ]

    tasks = client.get("/companies/c1/tasks", headers=auth_headers).json()
    assert [t["id"] for t in tasks] == [result["taskId"]]


def test_validation_error_maps_to_400(client, auth_headers, make_payload) -> None:
    payload = make_payload(workingOrder={"isNew": False, "id": ""})

    response = client.post("/companies/c1/job-orders", json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["detail"]["type"] == "validation"
    assert client.get("/companies/c1/tasks", headers=auth_headers).json() == []


def test_unknown_task_detail_maps_to_404(client, auth_headers, make_payload) -> None:
    payload = make_payload(taskDetails={"isNew": False, "id": "missing"})

    response = client.post("/companies/c1/job-orders", json=payload, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"]["type"] == "not_found"


def test_status_and_instruction_updates(client, auth_headers, make_payload) -> None:
    task_id = _create_job_order(client, auth_headers, make_payload())["taskId"]
    base = f"/companies/c1/tasks/{task_id}"

    response = client.patch(f"{base}/status", json={"status": "completed"}, headers=auth_headers)
    assert response.status_code == 400

    response = client.patch(f"{base}/status", json={"status": "in_progress"}, headers=auth_headers)
    assert response.json()["status"] == "in_progress"

    response = client.patch(
        f"{base}/instructions", json={"instructionsCompleted": [True, True]}, headers=auth_headers
    )
    assert response.json()["instructionsCompleted"] == [True, True]

    response = client.patch(
        f"{base}/instructions", json={"instructionsCompleted": [True]}, headers=auth_headers
    )
    assert response.status_code == 400


def test_working_order_endpoints(client, auth_headers, make_payload) -> None:
    result = _create_job_order(client, auth_headers, make_payload())
    order_url = f"/companies/c1/orders/{result['workingOrderId']}"

    orders = client.get("/companies/c1/projects/proj1/orders", headers=auth_headers).json()
    assert [order["id"] for order in orders] == [result["workingOrderId"]]
    assert orders[0]["counts"] == {"taskDetails": 1, "tasks": 1}

    response = client.patch(order_url, json={"title": "Renamed visit"}, headers=auth_headers)
    assert response.json()["title"] == "Renamed visit"

    response = client.delete(order_url, headers=auth_headers)
    assert response.json()["isActive"] is False
    assert client.get("/companies/c1/projects/proj1/orders", headers=auth_headers).json() == []

    response = client.post(
        "/companies/c1/projects/proj1/orders",
        json={"title": "Second visit", "contactId": "cust1"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["isActive"] is True


def test_company_endpoints(client, auth_headers) -> None:
    assert client.get("/companies/c1", headers=auth_headers).json()["name"] == "Acme Facilities"

    users = client.get("/companies/c1/users?search=cooper", headers=auth_headers).json()
    assert [user["id"] for user in users] == ["u3"]
