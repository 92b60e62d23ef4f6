import re

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def test_dashboard_counts(admin_client):
    response = admin_client.get("/admin")
    assert response.status_code == 200
    assert "Projects" in response.text
    assert "Unread" in response.text


def test_skill_icon_upload_is_stored_and_linked(admin_client):
    response = admin_client.post(
        "/admin/skills/add",
        data={"name": "FastAPI", "category": "Backend", "proficiency": "92", "icon": "", "icon_url": ""},
        files={"icon_file": ("fastapi.png", PNG_BYTES, "image/png")},
        follow_redirects=False,
    )
    assert response.status_code == 302
    assert response.headers["location"] == "/admin/skills"

    page = admin_client.get("/admin/skills").text
    match = re.search(r'src="(/images/[0-9a-f-]{36})"', page)
    assert match is not None

    image = admin_client.get(match.group(1))
    assert image.status_code == 200
    assert image.content == PNG_BYTES
    assert image.headers["content-type"] == "image/png"
    assert image.headers["cache-control"] == "public, max-age=31536000"


def test_skill_without_file_keeps_text_url_and_default_proficiency(admin_client):
    admin_client.post(
        "/admin/skills/add",
        data={"name": "Go", "category": "Backend", "proficiency": "n/a", "icon_url": "https://cdn.example.com/go.svg"},
        files={"icon_file": ("", b"", "application/octet-stream")},
    )
    page = admin_client.get("/admin/skills").text
    assert 'src="https://cdn.example.com/go.svg"' in page
    assert re.search(r"> Go</td>\s*<td>Backend</td>\s*<td>80%</td>", page)


def test_add_featured_project_appears_on_home(admin_client):
    response = admin_client.post(
        "/admin/projects/add",
        data={"title": "Shiny New Thing", "description": "d", "content": "# Hi", "technologies": "Python", "featured": "on"},
        follow_redirects=False,
    )
    assert response.status_code == 302
    assert response.headers["location"] == "/admin/projects"
    assert admin_client.get("/projects/shiny-new-thing").status_code == 200
    assert "/projects/shiny-new-thing" in admin_client.get("/").text


def test_project_without_featured_checkbox_stays_off_home(admin_client):
    admin_client.post("/admin/projects/add", data={"title": "Quiet Project", "description": "d"})
    assert "/projects/quiet-project" in admin_client.get("/projects").text
    assert "/projects/quiet-project" not in admin_client.get("/").text


def test_duplicate_title_fails_silently(admin_client):
    response = admin_client.post(
        "/admin/projects/add",
        data={"title": "Portfolio Website", "description": "again"},
        follow_redirects=False,
    )
    assert response.status_code == 302
    assert admin_client.get("/projects").text.count('href="/projects/portfolio-website"') == 1


def test_project_edit_regenerates_slug(admin_client):
    form = admin_client.get("/admin/projects/edit/1")
    assert form.status_code == 200
    response = admin_client.post(
        "/admin/projects/edit/1",
        data={"title": "Renamed Project", "description": "d"},
        follow_redirects=False,
    )
    assert response.status_code == 302
    assert admin_client.get("/projects/renamed-project").status_code == 200
    assert admin_client.get("/projects/portfolio-website").status_code == 404


def test_project_delete(admin_client):
    admin_client.post("/admin/projects/delete/2", follow_redirects=False)
    assert admin_client.get("/projects/ai-chat-app").status_code == 404
    assert admin_client.get("/admin/projects/edit/2").text == "Project not found"


def test_unpublished_blog_is_hidden_from_listing_but_reachable(admin_client):
    admin_client.post(
        "/admin/blogs/add",
        data={"title": "Draft Notes", "excerpt": "e", "content": "body"},
        files={"image_file": ("cover.jpg", b"jpeg-bytes", "image/jpeg")},
    )
    assert "/blogs/draft-notes" not in admin_client.get("/blogs").text
    detail = admin_client.get("/blogs/draft-notes")
    assert detail.status_code == 200
    assert re.search(r'src="/images/[0-9a-f-]{36}"', detail.text)


def test_blog_edit_unknown_id(admin_client):
    response = admin_client.get("/admin/blogs/edit/999")
    assert response.status_code == 404
    assert response.text == "Blog post not found"


def test_service_delete_then_edit_is_404(admin_client):
    response = admin_client.post("/admin/services/delete/1", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/admin/services"
    missing = admin_client.get("/admin/services/edit/1")
    assert missing.status_code == 404
    assert missing.text == "Service not found"
    assert "UI/UX Design" not in admin_client.get("/").text


def test_service_add_with_bad_order_index(admin_client):
    admin_client.post("/admin/services/add", data={"name": "Consulting", "order_index": "first"})
    page = admin_client.get("/admin/services").text
    assert "Consulting" in page


def test_education_crud(admin_client):
    admin_client.post(
        "/admin/education/add",
        data={"institution": "Open University", "degree": "MSc", "field": "Data Science", "start_date": "2021"},
    )
    assert "Open University" in admin_client.get("/about").text
    admin_client.post("/admin/education/edit/1", data={"institution": "Tech Institute", "degree": "BSc", "field": "CSE", "start_date": "2016"})
    assert "Tech Institute" in admin_client.get("/admin/education").text
    admin_client.post("/admin/education/delete/1")
    assert admin_client.get("/admin/education/edit/1").text == "Education not found"


def test_message_delete(admin_client):
    admin_client.post("/contact", data={"name": "Spam", "email": "s@example.com", "subject": "Buy now", "message": "!!!"})
    page = admin_client.get("/admin/messages").text
    message_id = re.search(r'/admin/messages/delete/(\d+)', page).group(1)
    admin_client.post(f"/admin/messages/delete/{message_id}")
    assert "Buy now" not in admin_client.get("/admin/messages").text


def test_profile_update_with_avatar_and_resume(admin_client):
    response = admin_client.post(
        "/admin/profile",
        data={"name": "Jane Doe", "title": "Engineer", "bio": "Hi", "email": "jane@example.com", "avatar_url": "", "resume_url": ""},
        files={
            "avatar_file": ("me.png", PNG_BYTES, "image/png"),
            "resume_file": ("cv.pdf", b"%PDF-1.4 resume", "application/pdf"),
        },
    )
    assert response.status_code == 200
    assert 'id="profile-success"' in response.text

    resume_url = re.search(r'href="(/files/[0-9a-f-]{36})"', response.text).group(1)
    download = admin_client.get(resume_url)
    assert download.content == b"%PDF-1.4 resume"
    assert download.headers["content-disposition"] == 'attachment; filename="cv.pdf"'
    assert "Jane Doe" in admin_client.get("/").text


def test_site_content_updates_existing_keys_only(admin_client):
    response = admin_client.post(
        "/admin/site-content",
        data={"hero_greeting": "Welcome aboard!", "made_up_key": "ignored"},
        follow_redirects=False,
    )
    assert response.status_code == 302
    assert "Welcome aboard!" in admin_client.get("/").text
    assert "made_up_key" not in admin_client.get("/admin/site-content").text


def test_email_settings_save_and_checkbox(admin_client):
    admin_client.post(
        "/admin/email-settings",
        data={"smtp_server": "mail.example.com", "smtp_port": "oops", "smtp_username": "u", "smtp_password": "p", "notification_email": "n@example.com"},
    )
    page = admin_client.get("/admin/email-settings").text
    assert 'value="mail.example.com"' in page
    assert 'value="587"' in page
    assert 'name="enabled" checked' not in page


def test_test_email_when_disabled(admin_client, fake_smtp):
    response = admin_client.post("/admin/email-settings/test")
    assert response.json() == {"success": False, "message": "Email notifications are disabled"}
    assert fake_smtp.instances == []


def test_test_email_sends_to_notification_address(admin_client, fake_smtp):
    admin_client.post(
        "/admin/email-settings",
        data={
            "smtp_server": "smtp.example.com",
            "smtp_port": "587",
            "smtp_username": "site@example.com",
            "smtp_password": "secret",
            "notification_email": "owner@example.com",
            "enabled": "on",
        },
    )
    response = admin_client.post("/admin/email-settings/test")
    assert response.json() == {"success": True, "message": "Test email sent successfully!"}
    [smtp] = fake_smtp.instances
    [(_, to_addrs, raw)] = smtp.sent
    assert to_addrs == ["owner@example.com"]
    assert "Subject: New Contact Form Message: Test Email" in raw


def test_ajax_image_upload(admin_client):
    response = admin_client.post("/admin/upload-image", files={"image": ("pic.png", PNG_BYTES, "image/png")})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["image_url"] == f"/images/{body['image_id']}"
    assert admin_client.get(body["image_url"]).content == PNG_BYTES


def test_ajax_image_upload_without_file(admin_client):
    response = admin_client.post("/admin/upload-image", data={"note": "nothing"})
    assert response.status_code == 400
    assert response.json() == {"error": "No image provided"}


def test_non_latin_project_titles_are_reachable_and_distinct(admin_client):
    admin_client.post("/admin/projects/add", data={"title": "Привет мир", "description": "d"})
    admin_client.post("/admin/projects/add", data={"title": "Пока мир", "description": "d"})
    assert admin_client.get("/projects/privet-mir").status_code == 200
    assert admin_client.get("/projects/poka-mir").status_code == 200
