"""
Test suite for job endpoints.

Tests cover:
- Job creation and role checks
- Listing with filters and viewer state
- Ownership checks on update, delete and close
"""

from app.models.application import Application
from app.models.job import Job
from app.models.saved_job import SavedJob

JOBS_URL = "/api/v1/jobs/"


def add_job(db_session, owner, **fields):
    """Helper to insert a job directly"""
    data = {"title": "Job", "location": "Remote", "category": "Engineering", "type": "Full-Time"}
    data.update(fields)
    job = Job(company_id=owner.id, **data)
    db_session.add(job)
    db_session.commit()
    db_session.refresh(job)
    return job


class TestJobCreation:
    """Tests for job creation endpoint"""

    def test_create_job_success(self, client, employer, auth_headers, sample_job_data):
        response = client.post(JOBS_URL, json=sample_job_data, headers=auth_headers(employer))

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == sample_job_data["title"]
        assert data["company_id"] == employer.id
        assert data["is_closed"] is False
        assert data["company"]["company_name"] == "Acme Corp"

    def test_jobseeker_cannot_post(self, client, jobseeker, auth_headers, sample_job_data):
        response = client.post(JOBS_URL, json=sample_job_data, headers=auth_headers(jobseeker))

        assert response.status_code == 403
        assert response.json()["message"] == "Only employers can post jobs"

    def test_requires_authentication(self, client, sample_job_data):
        response = client.post(JOBS_URL, json=sample_job_data)
        assert response.status_code == 401
        assert "message" in response.json()

    def test_missing_title_is_bad_request(self, client, employer, auth_headers):
        response = client.post(JOBS_URL, json={"location": "Remote"}, headers=auth_headers(employer))

        assert response.status_code == 400
        assert "title" in response.json()["message"]

    def test_inverted_salary_range_is_bad_request(self, client, employer, auth_headers):
        response = client.post(
            JOBS_URL,
            json={"title": "Designer", "salary_min": 90000, "salary_max": 50000},
            headers=auth_headers(employer),
        )
        assert response.status_code == 400


class TestJobListing:
    """Tests for the public job listing"""

    def test_closed_jobs_are_hidden(self, client, db_session, employer):
        add_job(db_session, employer, title="Open role")
        add_job(db_session, employer, title="Closed role", is_closed=True)

        response = client.get(JOBS_URL)

        assert response.status_code == 200
        titles = [j["title"] for j in response.json()]
        assert titles == ["Open role"]

    def test_keyword_and_location_are_case_insensitive(self, client, db_session, employer):
        add_job(db_session, employer, title="Senior Python Developer", location="Berlin")
        add_job(db_session, employer, title="Java Developer", location="Munich")

        response = client.get(JOBS_URL, params={"keyword": "python"})
        assert [j["title"] for j in response.json()] == ["Senior Python Developer"]

        response = client.get(JOBS_URL, params={"location": "MUNICH"})
        assert [j["title"] for j in response.json()] == ["Java Developer"]

    def test_category_and_type_are_exact(self, client, db_session, employer):
        add_job(db_session, employer, title="A", category="Design", type="Part-Time")
        add_job(db_session, employer, title="B", category="Design", type="Full-Time")
        add_job(db_session, employer, title="C", category="Engineering", type="Part-Time")

        response = client.get(JOBS_URL, params={"category": "Design", "type": "Part-Time"})
        assert [j["title"] for j in response.json()] == ["A"]

    def test_salary_range_overlap(self, client, db_session, employer):
        add_job(db_session, employer, title="Low", salary_min=30000, salary_max=40000)
        add_job(db_session, employer, title="Mid", salary_min=50000, salary_max=70000)
        add_job(db_session, employer, title="High", salary_min=90000, salary_max=120000)

        response = client.get(JOBS_URL, params={"min_salary": 45000})
        assert sorted(j["title"] for j in response.json()) == ["High", "Mid"]

        response = client.get(JOBS_URL, params={"max_salary": 60000})
        assert sorted(j["title"] for j in response.json()) == ["Low", "Mid"]

        response = client.get(JOBS_URL, params={"min_salary": 45000, "max_salary": 60000})
        assert [j["title"] for j in response.json()] == ["Mid"]

    def test_viewer_state_with_user_id(self, client, db_session, employer, jobseeker):
        saved = add_job(db_session, employer, title="Saved")
        applied = add_job(db_session, employer, title="Applied")
        add_job(db_session, employer, title="Untouched")
        db_session.add(SavedJob(job_id=saved.id, jobseeker_id=jobseeker.id))
        db_session.add(Application(job_id=applied.id, applicant_id=jobseeker.id, status="Accepted"))
        db_session.commit()

        response = client.get(JOBS_URL, params={"user_id": jobseeker.id})
        by_title = {j["title"]: j for j in response.json()}

        assert by_title["Saved"]["is_saved"] is True
        assert by_title["Saved"]["application_status"] is None
        assert by_title["Applied"]["is_saved"] is False
        assert by_title["Applied"]["application_status"] == "Accepted"
        assert by_title["Untouched"]["is_saved"] is False

    def test_without_user_id_nothing_is_saved(self, client, job):
        data = client.get(JOBS_URL).json()
        assert data[0]["is_saved"] is False
        assert data[0]["application_status"] is None


class TestEmployerJobs:
    """Tests for the employer dashboard listing"""

    def test_lists_own_jobs_with_counts(self, client, db_session, employer, other_employer, jobseeker, other_jobseeker, auth_headers):
        first = add_job(db_session, employer, title="First")
        add_job(db_session, employer, title="Second", is_closed=True)
        add_job(db_session, other_employer, title="Not mine")
        db_session.add_all([
            Application(job_id=first.id, applicant_id=jobseeker.id),
            Application(job_id=first.id, applicant_id=other_jobseeker.id),
        ])
        db_session.commit()

        response = client.get(f"{JOBS_URL}employer", headers=auth_headers(employer))

        assert response.status_code == 200
        counts = {j["title"]: j["application_count"] for j in response.json()}
        assert counts == {"First": 2, "Second": 0}

    def test_jobseeker_is_denied(self, client, jobseeker, auth_headers):
        response = client.get(f"{JOBS_URL}employer", headers=auth_headers(jobseeker))
        assert response.status_code == 403
        assert response.json()["message"] == "Access denied"


class TestJobRetrieval:
    """Tests for retrieving a single job"""

    def test_get_job_by_id(self, client, job):
        response = client.get(f"{JOBS_URL}{job.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == job.id
        assert data["company"]["name"] == "Acme HR"
        assert data["application_status"] is None

    def test_application_status_for_user(self, client, db_session, job, jobseeker):
        db_session.add(Application(job_id=job.id, applicant_id=jobseeker.id))
        db_session.commit()

        response = client.get(f"{JOBS_URL}{job.id}", params={"user_id": jobseeker.id})
        assert response.json()["application_status"] == "In Review"

    def test_get_nonexistent_job(self, client):
        response = client.get(f"{JOBS_URL}99999")

        assert response.status_code == 404
        assert response.json()["message"] == "Job not found"


class TestJobOwnership:
    """Only the owning employer may modify a job"""

    def test_owner_updates_job(self, client, job, employer, auth_headers):
        response = client.put(
            f"{JOBS_URL}{job.id}",
            json={"title": "Staff Python Developer", "salary_max": 110000},
            headers=auth_headers(employer),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Staff Python Developer"
        assert data["salary_max"] == 110000
        assert data["location"] == "Berlin, Germany"

    def test_other_employer_cannot_update(self, client, db_session, job, other_employer, auth_headers):
        response = client.put(f"{JOBS_URL}{job.id}", json={"title": "Hijacked"}, headers=auth_headers(other_employer))

        assert response.status_code == 403
        db_session.refresh(job)
        assert job.title == "Senior Python Developer"

    def test_other_employer_cannot_delete(self, client, job, other_employer, auth_headers):
        response = client.delete(f"{JOBS_URL}{job.id}", headers=auth_headers(other_employer))
        assert response.status_code == 403

        assert client.get(f"{JOBS_URL}{job.id}").status_code == 200

    def test_other_employer_cannot_close(self, client, job, other_employer, auth_headers):
        response = client.put(f"{JOBS_URL}{job.id}/toggle-close", headers=auth_headers(other_employer))
        assert response.status_code == 403

    def test_update_missing_job(self, client, employer, auth_headers):
        response = client.put(f"{JOBS_URL}4242", json={"title": "X"}, headers=auth_headers(employer))
        assert response.status_code == 404

    def test_update_cannot_invert_salary_range(self, client, db_session, job, employer, auth_headers):
        """A partial update is checked against the stored other bound"""
        response = client.put(f"{JOBS_URL}{job.id}", json={"salary_min": 500000}, headers=auth_headers(employer))

        assert response.status_code == 400
        assert response.json()["message"] == "salary_min cannot be greater than salary_max"
        db_session.refresh(job)
        assert (job.salary_min, job.salary_max) == (70000, 95000)

    def test_update_both_salary_bounds(self, client, job, employer, auth_headers):
        response = client.put(
            f"{JOBS_URL}{job.id}",
            json={"salary_min": 100000, "salary_max": 120000},
            headers=auth_headers(employer),
        )
        assert response.status_code == 200
        assert response.json()["salary_min"] == 100000

    def test_null_title_is_bad_request(self, client, db_session, job, employer, auth_headers):
        response = client.put(f"{JOBS_URL}{job.id}", json={"title": None}, headers=auth_headers(employer))

        assert response.status_code == 400
        assert "title" in response.json()["message"]
        db_session.refresh(job)
        assert job.title == "Senior Python Developer"

    def test_null_is_closed_is_bad_request(self, client, db_session, job, employer, auth_headers):
        response = client.put(f"{JOBS_URL}{job.id}", json={"is_closed": None}, headers=auth_headers(employer))

        assert response.status_code == 400
        assert "is_closed" in response.json()["message"]
        db_session.refresh(job)
        assert job.is_closed is False

    def test_clearing_optional_field_is_allowed(self, client, job, employer, auth_headers):
        response = client.put(f"{JOBS_URL}{job.id}", json={"description": None}, headers=auth_headers(employer))

        assert response.status_code == 200
        assert response.json()["description"] is None


class TestJobLifecycle:
    """Close, reopen and delete"""

    def test_toggle_close_and_reopen(self, client, job, employer, auth_headers):
        response = client.put(f"{JOBS_URL}{job.id}/toggle-close", headers=auth_headers(employer))
        assert response.status_code == 200
        assert response.json()["message"] == "Job closed"
        assert client.get(JOBS_URL).json() == []

        response = client.put(f"{JOBS_URL}{job.id}/toggle-close", headers=auth_headers(employer))
        assert response.json()["message"] == "Job reopened"
        assert len(client.get(JOBS_URL).json()) == 1

    def test_delete_job_keeps_applications(self, client, db_session, job, employer, jobseeker, auth_headers):
        db_session.add(Application(job_id=job.id, applicant_id=jobseeker.id))
        db_session.commit()

        response = client.delete(f"{JOBS_URL}{job.id}", headers=auth_headers(employer))

        assert response.status_code == 200
        assert response.json()["message"] == "Job deleted successfully"
        assert client.get(f"{JOBS_URL}{job.id}").status_code == 404

        my_apps = client.get("/api/v1/applications/my", headers=auth_headers(jobseeker)).json()
        assert len(my_apps) == 1
        assert my_apps[0]["job"] is None
