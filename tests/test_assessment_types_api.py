def test_create_assessment_type_reports_weightage(client):
    res = client.post("/v1/assessment-types/", json={
        "name": "Continuous Assessment", "code": "CA", "weightage": 30, "max_marks": 30, "order": 1,
    })
    assert res.status_code == 200
    body = res.json()
    assert body["data"]["code"] == "CA"
    assert body["weightage"] == {"total": 30, "deviation": -70, "is_valid": False, "has_active": True}


def test_weightage_of_default_configuration(client, assessment_types):
    res = client.get("/v1/assessment-types/weightage")
    assert res.json()["data"]["total"] == 100
    assert res.json()["data"]["is_valid"] is True


def test_list_is_ordered_and_can_filter_active(client, assessment_types):
    client.delete(f"/v1/assessment-types/{assessment_types['mid'].id}")

    codes = [a["code"] for a in client.get("/v1/assessment-types/").json()["data"]]
    assert codes == ["CA", "MID", "EOT"]

    active = [a["code"] for a in client.get("/v1/assessment-types/", params={"active_only": True}).json()["data"]]
    assert active == ["CA", "EOT"]


def test_deactivation_changes_weightage(client, assessment_types):
    res = client.delete(f"/v1/assessment-types/{assessment_types['mid'].id}")
    assert res.status_code == 200
    assert res.json()["weightage"]["total"] == 80
    assert res.json()["weightage"]["deviation"] == -20


def test_partial_update(client, assessment_types):
    res = client.put(f"/v1/assessment-types/{assessment_types['exam'].id}", json={"weightage": 60})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["weightage"] == 60
    assert data["name"] == "End of Term"
    assert res.json()["weightage"]["deviation"] == 10


def test_weightage_above_100_is_rejected(client):
    res = client.post("/v1/assessment-types/", json={
        "name": "Project", "code": "PRJ", "weightage": 120, "max_marks": 50,
    })
    assert res.status_code == 422


def test_unknown_assessment_type(client):
    res = client.put("/v1/assessment-types/404", json={"weightage": 10})
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Assessment type 404 not found"


def test_grading_scale(client):
    scale = client.get("/v1/assessment-types/grading-scale").json()["data"]
    assert [s["grade"] for s in scale] == ["Distinction", "Merit", "Credit", "Pass", "Fail"]
    assert scale[0] == {
        "grade": "Distinction", "min_score": 80, "max_score": 100, "points": 1, "comment": "Exemplary performance",
    }
