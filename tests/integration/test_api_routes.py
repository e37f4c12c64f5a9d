"""
Testes de integração das rotas REST (FastAPI TestClient).
"""
import pytest

API = "/api/v1"


class TestSystemRoutes:

    def test_banner(self, client):
        response = client.get("/")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["name"] == "Clueso API"
        assert body["data"]["health"] == f"{API}/health"

    def test_health(self, client):
        response = client.get(f"{API}/health")
        body = response.json()

        assert response.status_code == 200
        assert body["message"] == "API is healthy"
        assert body["data"]["version"] == "1.0.0"
        assert body["data"]["uptime_seconds"] >= 0
        assert "total_files" in body["data"]["storage_usage"]
        assert body["data"]["realtime"]["active_connections"] == 0

    def test_process_time_header(self, client):
        response = client.get(f"{API}/health")
        assert "X-Process-Time" in response.headers
        assert "X-Request-ID" in response.headers

    def test_unknown_route(self, client):
        response = client.get(f"{API}/nope")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Route not found",
            "message": f"Route GET {API}/nope not found",
            "code": "NOT_FOUND"
        }


class TestAuthRoutes:

    @pytest.mark.parametrize("payload", [{}, {"email": "demo@clueso.io"}, {"password": "x"}])
    def test_login_requires_email_and_password(self, client, payload):
        response = client.post(f"{API}/auth/login", json=payload)
        assert response.status_code == 400
        assert response.json()["error"] == "Email and password required"

    def test_login(self, client):
        response = client.post(f"{API}/auth/login", json={"email": "me@clueso.io", "password": "pw"})
        body = response.json()

        assert response.status_code == 200
        assert body["message"] == "Login successful"
        assert body["data"]["user"]["email"] == "me@clueso.io"
        assert body["data"]["tokens"]["accessToken"]
        assert body["data"]["tokens"]["refreshToken"]

    def test_register(self, client):
        response = client.post(f"{API}/auth/register", json={
            "email": "ada@clueso.io",
            "password": "pw",
            "firstName": "Ada",
            "lastName": "Lovelace"
        })
        assert response.status_code == 201
        assert response.json()["data"]["user"]["firstName"] == "Ada"

    def test_register_requires_all_fields(self, client):
        response = client.post(f"{API}/auth/register", json={"email": "ada@clueso.io", "password": "pw"})
        assert response.status_code == 400
        assert response.json()["error"] == "All fields are required"

    def test_me_requires_token(self, client):
        response = client.get(f"{API}/auth/me")
        assert response.status_code == 401
        assert response.json()["error"] == "Access token required"
        assert response.json()["code"] == "AUTHENTICATION_ERROR"

    def test_me_rejects_unknown_token(self, client):
        response = client.get(f"{API}/auth/me", headers={"Authorization": "Bearer bogus"})
        assert response.status_code == 401
        assert response.json()["error"] == "Invalid token"

    def test_me(self, client, auth_headers):
        response = client.get(f"{API}/auth/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["data"]["email"] == "demo@clueso.io"

    def test_refresh_rotates_tokens(self, client, login):
        tokens = login()["tokens"]

        response = client.post(f"{API}/auth/refresh", json={"refreshToken": tokens["refreshToken"]})
        new_tokens = response.json()["data"]["tokens"]

        assert response.status_code == 200
        assert new_tokens["accessToken"] != tokens["accessToken"]

        reused = client.post(f"{API}/auth/refresh", json={"refreshToken": tokens["refreshToken"]})
        assert reused.status_code == 401

    def test_logout_revokes_token(self, client, auth_headers):
        assert client.post(f"{API}/auth/logout", headers=auth_headers).status_code == 200
        assert client.get(f"{API}/auth/me", headers=auth_headers).status_code == 401


class TestProjectAndWorkspaceRoutes:

    def test_list_projects_paginated(self, client):
        response = client.get(f"{API}/projects", params={"limit": 2})
        data = response.json()["data"]

        assert len(data["data"]) == 2
        assert data["pagination"] == {"page": 1, "limit": 2, "total": 3, "pages": 2}

    @pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 101}, {"page": 0}])
    def test_invalid_pagination(self, client, params):
        response = client.get(f"{API}/projects", params=params)
        body = response.json()

        assert response.status_code == 400
        assert body["error"] == "Validation error"
        assert body["details"][0]["field"] == next(iter(params))

    def test_create_project(self, client):
        response = client.post(f"{API}/projects", json={
            "name": "Launch",
            "description": "Launch videos",
            "workspaceId": "1"
        })
        data = response.json()["data"]

        assert response.status_code == 201
        assert data["name"] == "Launch"
        assert data["description"] == "Launch videos"
        assert data["workspace"] == "1"

    def test_create_project_requires_name(self, client):
        response = client.post(f"{API}/projects", json={"description": "No name"})
        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "name"

    def test_get_project_and_activity(self, client):
        assert client.get(f"{API}/projects/abc").json()["data"]["_id"] == "abc"
        activity = client.get(f"{API}/projects/abc/activity").json()["data"]
        assert [a["action"] for a in activity] == ["uploaded video", "edited script"]

    def test_workspaces(self, client):
        listing = client.get(f"{API}/workspaces").json()["data"]
        assert listing["pagination"]["total"] == 2

        created = client.post(f"{API}/workspaces", json={"name": "Sales"})
        assert created.status_code == 201
        assert created.json()["data"]["name"] == "Sales"

        assert client.get(f"{API}/workspaces/7").json()["data"]["_id"] == "7"


class TestVideoRoutes:

    def test_list_and_filter(self, client):
        assert client.get(f"{API}/videos").json()["data"]["pagination"]["total"] == 3
        processing = client.get(f"{API}/videos", params={"status": "processing"}).json()["data"]
        assert [v["title"] for v in processing["data"]] == ["Release Highlights"]

    def test_demo_detail(self, client):
        data = client.get(f"{API}/videos/99").json()["data"]
        assert data["_id"] == "99"
        assert len(data["captions"]) == 2
        assert len(data["metadata"]["keyframes"]) == 3

    def test_progress(self, client):
        data = client.get(f"{API}/videos/3/progress").json()["data"]
        assert data == {"processing": {"stage": "generate_captions", "progress": 60}, "status": "processing"}

    def test_upload_requires_auth(self, client):
        response = client.post(
            f"{API}/videos/upload",
            files={"video": ("clip.webm", b"data", "video/webm")}
        )
        assert response.status_code == 401

    def test_upload_rejects_unsupported_format(self, client, auth_headers):
        response = client.post(
            f"{API}/videos/upload",
            headers=auth_headers,
            files={"video": ("notes.txt", b"hello", "text/plain")}
        )
        assert response.status_code == 400
        assert "Unsupported file format" in response.json()["error"]

    def test_upload_requires_file(self, client, auth_headers):
        response = client.post(f"{API}/videos/upload", headers=auth_headers, data={"title": "x"})
        assert response.status_code == 400
        assert response.json()["error"] == "Video file is required"

    def test_upload_registers_video(self, client, auth_headers):
        response = client.post(
            f"{API}/videos/upload",
            headers=auth_headers,
            data={"title": "Screen Recording 2024-01-02 03:04:05", "projectId": "2"},
            files={"video": ("screen-recording-1.webm", b"\x1aE\xdf\xa3webm", "video/webm")}
        )
        video = response.json()["data"]

        assert response.status_code == 201
        assert video["title"] == "Screen Recording 2024-01-02 03:04:05"
        assert video["project"] == "2"
        assert video["status"] == "ready"
        assert video["originalFile"]["format"] == "webm"
        assert video["originalFile"]["size"] == 8

        detail = client.get(f"{API}/videos/{video['_id']}").json()["data"]
        assert detail["title"] == video["title"]

        listing = client.get(f"{API}/videos", params={"projectId": "2"}).json()["data"]
        assert listing["data"][0]["_id"] == video["_id"]

        served = client.get(video["originalFile"]["url"])
        assert served.status_code == 200
        assert served.content == b"\x1aE\xdf\xa3webm"

    def test_export(self, client):
        response = client.post(f"{API}/videos/1/export", json={"format": "gif", "quality": "4k"})
        data = response.json()["data"]
        assert data["status"] == "processing"
        assert data["format"] == "gif"
        assert data["estimatedTime"] == "2-3 minutes"

    def test_export_defaults(self, client):
        data = client.post(f"{API}/videos/1/export").json()["data"]
        assert (data["format"], data["quality"]) == ("mp4", "high")

    def test_export_rejects_unknown_format(self, client):
        response = client.post(f"{API}/videos/1/export", json={"format": "avi"})
        assert response.status_code == 400


class TestAiAndCatalogRoutes:

    def test_enhance_script(self, client):
        response = client.post(f"{API}/ai/enhance-script", json={"text": "um so. like this works"})
        assert response.json()["data"]["enhancedText"] == "So. This works."

    def test_enhance_script_requires_text(self, client):
        response = client.post(f"{API}/ai/enhance-script", json={})
        assert response.status_code == 400
        assert response.json()["error"] == "Text is required"

    def test_summary_tags_captions(self, client):
        summary = client.post(f"{API}/ai/generate-summary", json={"text": "a b c"}).json()["data"]
        assert summary["wordCount"] == 3

        tags = client.post(f"{API}/ai/generate-tags", json={"text": "a", "title": "b"}).json()["data"]
        assert "tutorial" in tags["tags"]

        captions = client.post(f"{API}/ai/generate-captions", json={"text": "one two"}).json()["data"]
        assert captions["segments"][0]["end"] == 1.0

    def test_analytics(self, client):
        data = client.get(f"{API}/analytics/overview").json()["data"]
        assert data["totalVideos"] == 12
        assert len(data["recentActivity"]) == 2

    @pytest.mark.parametrize("params,expected", [
        ({}, 3),
        ({"category": "all"}, 3),
        ({"category": "business"}, 1),
        ({"search": "captions"}, 1),
        ({"category": "Education", "search": "music"}, 0),
    ])
    def test_templates(self, client, params, expected):
        data = client.get(f"{API}/templates", params=params).json()["data"]
        assert len(data["templates"]) == expected

    def test_search(self, client):
        empty = client.get(f"{API}/search", params={"q": "d"}).json()["data"]
        assert empty["total"] == 0

        data = client.get(f"{API}/search", params={"q": "demo", "types": "projects,videos"}).json()["data"]
        assert data["total"] == 2
        assert data["workspaces"] == []


class TestFeedbackRoutes:

    def test_requires_auth(self, client):
        assert client.get(f"{API}/feedback").status_code == 401
        assert client.post(f"{API}/feedback", json={"message": "Something broke here"}).status_code == 401

    def test_submit_list_and_stats(self, client, auth_headers):
        created = client.post(
            f"{API}/feedback",
            headers=auth_headers,
            json={"message": "Captions drift after 10 minutes", "type": "bug", "priority": "high"}
        )
        assert created.status_code == 201
        feedback = created.json()["data"]
        assert feedback["type"] == "bug"
        assert feedback["status"] == "new"
        assert feedback["userName"] == "Demo User"

        client.post(f"{API}/feedback", headers=auth_headers, json={"message": "Please add a dark theme", "type": "feature"})

        listing = client.get(f"{API}/feedback", headers=auth_headers, params={"type": "bug"}).json()["data"]
        assert listing["total"] == 1
        assert listing["filtered"] == 1
        assert listing["feedback"][0]["id"] == feedback["id"]

        stats = client.get(f"{API}/feedback/stats", headers=auth_headers).json()["data"]
        assert stats["total"] == 2
        assert stats["byType"]["bug"]["new"] == 1
        assert stats["byType"]["feature"]["total"] == 1

    def test_list_counts_with_type_filter_and_limit(self, client, auth_headers):
        client.post(f"{API}/feedback", headers=auth_headers, json={"message": "Audio out of sync", "type": "bug"})
        client.post(f"{API}/feedback", headers=auth_headers, json={"message": "Add keyboard shortcuts", "type": "feature"})

        listing = client.get(
            f"{API}/feedback", headers=auth_headers, params={"type": "bug", "limit": 1}
        ).json()["data"]

        assert listing["total"] == 1
        assert listing["filtered"] == 1
        assert listing["pages"] == 1
        assert listing["limit"] == 1

    def test_submit_validation(self, client, auth_headers):
        response = client.post(f"{API}/feedback", headers=auth_headers, json={"message": "short"})
        body = response.json()
        assert response.status_code == 400
        assert body["error"] == "Validation error"
        assert body["details"][0]["field"] == "message"

    def test_invalid_type(self, client, auth_headers):
        response = client.post(
            f"{API}/feedback",
            headers=auth_headers,
            json={"message": "A valid message body", "type": "rant"}
        )
        assert response.status_code == 400

    def test_update_status(self, client, auth_headers):
        feedback = client.post(
            f"{API}/feedback", headers=auth_headers, json={"message": "Export stalls at 99%"}
        ).json()["data"]

        response = client.put(
            f"{API}/feedback/{feedback['id']}/status",
            headers=auth_headers,
            json={"status": "resolved"}
        )
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "resolved"

        resolved = client.get(f"{API}/feedback", headers=auth_headers, params={"status": "resolved"}).json()["data"]
        assert resolved["filtered"] == 1

    def test_update_unknown_feedback(self, client, auth_headers):
        response = client.put(f"{API}/feedback/missing/status", headers=auth_headers, json={"status": "reviewing"})
        assert response.status_code == 404
        assert response.json()["error"] == "Feedback not found"

    def test_list_limit_bounds(self, client, auth_headers):
        response = client.get(f"{API}/feedback", headers=auth_headers, params={"limit": 101})
        assert response.status_code == 400


class TestTemplateRoutes:

    def test_featured_and_popular(self, client):
        featured = client.get(f"{API}/templates/featured").json()["data"]["templates"]
        popular = client.get(f"{API}/templates/popular").json()["data"]["templates"]

        assert [t["_id"] for t in featured] == ["2", "1"]
        assert [t["_id"] for t in popular] == ["3", "1", "2"]

    def test_detail_includes_template_data(self, client):
        template = client.get(f"{API}/templates/1").json()["data"]["template"]
        assert template["name"] == "Tutorial Template"
        assert "templateData" in template

    def test_listing_omits_template_data(self, client):
        templates = client.get(f"{API}/templates").json()["data"]["templates"]
        assert all("templateData" not in t for t in templates)

    def test_unknown_template(self, client):
        response = client.get(f"{API}/templates/99")
        assert response.status_code == 404
        assert response.json()["error"] == "Template not found"

    @pytest.mark.parametrize("action,body", [("use", {}), ("rate", {"rating": 4})])
    def test_actions_require_auth(self, client, action, body):
        assert client.post(f"{API}/templates/1/{action}", json=body).status_code == 401

    def test_use_template(self, client, auth_headers):
        data = client.post(f"{API}/templates/3/use", headers=auth_headers).json()["data"]
        assert data["message"] == "Template ready to use"
        assert data["projectName"] == "Social Media Project"

    def test_rate_template(self, client, auth_headers):
        response = client.post(f"{API}/templates/1/rate", headers=auth_headers, json={"rating": 5})
        assert response.status_code == 200
        assert response.json()["data"]["newRating"] == 5

    @pytest.mark.parametrize("body", [None, {}, {"rating": 6}, {"rating": 0}])
    def test_rate_template_out_of_range(self, client, auth_headers, body):
        response = client.post(f"{API}/templates/1/rate", headers=auth_headers, json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Rating must be between 1 and 5"

    def test_rate_unknown_template(self, client, auth_headers):
        response = client.post(f"{API}/templates/99/rate", headers=auth_headers, json={"rating": 3})
        assert response.status_code == 404


class TestUserProgressRoutes:

    @pytest.mark.parametrize("method,path", [
        ("get", ""),
        ("put", "/onboarding"),
        ("post", "/tutorial/complete"),
        ("put", "/preferences"),
        ("get", "/tutorials"),
        ("get", "/help"),
    ])
    def test_requires_auth(self, client, method, path):
        assert client.request(method.upper(), f"{API}/user-progress{path}").status_code == 401

    def test_initial_progress(self, client, auth_headers):
        data = client.get(f"{API}/user-progress", headers=auth_headers).json()["data"]
        assert data["onboardingStep"] == 0
        assert data["completedTutorials"] == []
        assert data["preferences"] == {"showTutorialHints": True, "skipIntroVideos": False}

    def test_onboarding(self, client, auth_headers):
        response = client.put(f"{API}/user-progress/onboarding", headers=auth_headers, json={"step": 3})
        assert response.json()["data"]["onboardingStep"] == 3

        stored = client.get(f"{API}/user-progress", headers=auth_headers).json()["data"]
        assert stored["onboardingStep"] == 3

    @pytest.mark.parametrize("body", [{}, {"step": 11}, {"step": "two"}, {"step": True}])
    def test_invalid_onboarding_step(self, client, auth_headers, body):
        response = client.put(f"{API}/user-progress/onboarding", headers=auth_headers, json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid onboarding step"

    def test_complete_tutorial_reports_new_achievements(self, client, auth_headers):
        path = f"{API}/user-progress/tutorial/complete"
        first = client.post(path, headers=auth_headers, json={"tutorialId": "getting_started"}).json()
        again = client.post(path, headers=auth_headers, json={"tutorialId": "getting_started"}).json()

        assert first["newAchievements"] == ["first_tutorial"]
        assert first["data"]["achievements"] == ["first_tutorial"]
        assert again["newAchievements"] == []
        assert again["data"]["completedTutorials"] == ["getting_started"]

    def test_complete_tutorial_requires_id(self, client, auth_headers):
        response = client.post(f"{API}/user-progress/tutorial/complete", headers=auth_headers, json={})
        assert response.status_code == 400
        assert response.json()["error"] == "Tutorial ID is required"

    def test_preferences(self, client, auth_headers):
        response = client.put(
            f"{API}/user-progress/preferences",
            headers=auth_headers,
            json={"preferences": {"showTutorialHints": False}}
        )
        assert response.json()["data"]["preferences"] == {"showTutorialHints": False, "skipIntroVideos": False}

    def test_preferences_require_object(self, client, auth_headers):
        response = client.put(f"{API}/user-progress/preferences", headers=auth_headers, json={"preferences": "x"})
        assert response.status_code == 400

    def test_tutorials_and_help(self, client, auth_headers):
        tutorials = client.get(f"{API}/user-progress/tutorials", headers=auth_headers).json()["data"]
        assert len(tutorials) == 5

        help_articles = client.get(
            f"{API}/user-progress/help",
            headers=auth_headers,
            params={"category": "collaboration"}
        ).json()["data"]
        assert [a["id"] for a in help_articles] == ["team_management"]

