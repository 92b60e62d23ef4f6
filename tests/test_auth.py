import pytest

from tests.conftest import login


GATED_PATHS = [
    "/admin",
    "/admin/profile",
    "/admin/skills",
    "/admin/projects",
    "/admin/projects/add",
    "/admin/projects/edit/1",
    "/admin/blogs",
    "/admin/blogs/add",
    "/admin/services",
    "/admin/services/edit/1",
    "/admin/messages",
    "/admin/education",
    "/admin/education/add",
    "/admin/email-settings",
    "/admin/site-content",
    "/admin/password",
]


@pytest.mark.parametrize("path", GATED_PATHS)
def test_anonymous_admin_pages_redirect_to_login(client, path):
    response = client.get(path, follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/admin/login"


@pytest.mark.parametrize("path", ["/admin/projects/delete/1", "/admin/skills/add", "/admin/site-content"])
def test_anonymous_mutations_redirect_without_side_effects(client, path):
    response = client.post(path, data={"title": "x"}, follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/admin/login"
    assert client.get("/projects/portfolio-website").status_code == 200


def test_anonymous_upload_gets_json_401(client):
    response = client.post("/admin/upload-image", files={"image": ("a.png", b"data", "image/png")})
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_login_page_is_open(client):
    response = client.get("/admin/login")
    assert response.status_code == 200
    assert 'name="username"' in response.text


def test_default_credentials_reach_dashboard(client):
    response = login(client)
    assert response.status_code == 302
    assert response.headers["location"] == "/admin"

    dashboard = client.get("/admin")
    assert dashboard.status_code == 200
    assert "Dashboard" in dashboard.text
    assert 'id="password-banner"' in dashboard.text


def test_wrong_password_rerenders_login_with_error(client):
    response = login(client, password="nope")
    assert response.status_code == 200
    assert 'id="login-error"' in response.text
    assert client.get("/admin", follow_redirects=False).status_code == 302


def test_login_page_redirects_when_already_logged_in(admin_client):
    response = admin_client.get("/admin/login", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/admin"


def test_logout_clears_session(admin_client):
    response = admin_client.get("/admin/logout", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/admin/login"
    assert admin_client.get("/admin", follow_redirects=False).status_code == 302


def test_login_requires_both_fields(client):
    response = client.post("/admin/login", data={"username": "admin"})
    assert response.status_code == 422


def test_password_change_rotates_credentials(admin_client):
    response = admin_client.post(
        "/admin/password",
        data={
            "current_password": "admin123",
            "new_password": "a-much-better-secret",
            "confirm_password": "a-much-better-secret",
        },
        follow_redirects=False,
    )
    assert response.status_code == 302
    assert response.headers["location"] == "/admin"
    assert 'id="password-banner"' not in admin_client.get("/admin").text

    admin_client.get("/admin/logout")
    assert login(admin_client, password="admin123").status_code == 200
    assert login(admin_client, password="a-much-better-secret").status_code == 302


def test_password_change_with_wrong_current_password(admin_client):
    response = admin_client.post(
        "/admin/password",
        data={
            "current_password": "wrong",
            "new_password": "a-much-better-secret",
            "confirm_password": "a-much-better-secret",
        },
    )
    assert response.status_code == 200
    assert 'id="password-error"' in response.text
    assert "Current password is incorrect." in response.text
    assert 'id="password-banner"' in response.text


def test_password_change_with_mismatched_confirmation(admin_client):
    response = admin_client.post(
        "/admin/password",
        data={
            "current_password": "admin123",
            "new_password": "a-much-better-secret",
            "confirm_password": "a-different-secret",
        },
    )
    assert response.status_code == 200
    assert "New passwords do not match." in response.text
    assert login(admin_client, password="admin123").status_code == 302
