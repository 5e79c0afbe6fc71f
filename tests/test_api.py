import pytest

from streamerpulse.models.contact import Contact
from streamerpulse.models.giveaway import GiveawayContent, GiveawayEntry
from streamerpulse.models.media import Short, Video
from streamerpulse.models.news import News
from streamerpulse.models.review import Review
from streamerpulse.models.schedule import ScheduleEvent
from streamerpulse.models.tracking import LinkClick, Visitor


@pytest.fixture(autouse=True)
def db_cleanup(db_session):
    for model in [GiveawayEntry, GiveawayContent, Contact, News, Review, ScheduleEvent, Short, Video, Visitor, LinkClick]:
        db_session.query(model).delete()
    db_session.commit()


def make_entry(client, email="player@example.com", user_id="1001", username="player1"):
    return client.post("api/giveaway/submit-entry", json={
        "affiliate_username": username,
        "affiliate_user_id": user_id,
        "email": email
    })


class TestGiveawayAPI:

    def test_submit_entry(self, client, admin_headers):
        response = make_entry(client, email="  Player@Example.COM ", user_id=" 1001 ")
        assert response.status_code == 200
        assert response.json()["success"] is True

        entries = client.get("api/giveaway/entries", headers=admin_headers).json()
        assert entries["count"] == 1
        entry = entries["entries"][0]
        assert entry["email"] == "player@example.com"
        assert entry["affiliate_user_id"] == "1001"
        assert entry["deposit_amount"] == 20
        assert entry["prize"] is None

    def test_duplicate_email_rejected(self, client):
        assert make_entry(client, user_id="1001").status_code == 200
        response = make_entry(client, email="PLAYER@example.com", user_id="2002")
        assert response.status_code == 400
        assert response.json()["error_code"] == "DUPLICATE_ENTRY"

    def test_duplicate_user_id_rejected(self, client):
        assert make_entry(client, email="one@example.com", user_id="1001").status_code == 200
        response = make_entry(client, email="two@example.com", user_id="1001")
        assert response.status_code == 400

    def test_invalid_email_rejected(self, client):
        response = make_entry(client, email="not-an-email")
        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "email"

    def test_missing_fields_rejected(self, client):
        response = client.post("api/giveaway/submit-entry", json={"email": "a@b.co"})
        assert response.status_code == 422

    def test_spin_once_per_email(self, client):
        make_entry(client)
        first = client.post("api/giveaway/spin-result", json={"email": "player@example.com", "prize": " $10 "})
        assert first.status_code == 200
        assert first.json()["prize"] == "$10"

        second = client.post("api/giveaway/spin-result", json={"email": "player@example.com", "prize": "$25"})
        assert second.status_code == 400
        assert second.json()["error_code"] == "ALREADY_SPUN"

    def test_spin_without_entry(self, client):
        response = client.post("api/giveaway/spin-result", json={"email": "ghost@example.com", "prize": "$10"})
        assert response.status_code == 404
        assert response.json()["error_code"] == "ENTRY_NOT_FOUND"

    def test_entries_require_admin(self, client):
        assert client.get("api/giveaway/entries").status_code == 401
        response = client.get("api/giveaway/entries", headers={"Authorization": "Bearer wrong"})
        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"

    def test_giveaway_content(self, client, admin_headers):
        created = client.post("api/giveaway-content", headers=admin_headers, json={
            "type": "rules",
            "title": "Deposit $20",
            "description": "Deposit at least $20 during the month."
        })
        assert created.status_code == 201

        response = client.get("api/giveaway/content?type=rules")
        assert response.status_code == 200
        items = response.json()["items"]
        assert items == [{
            "title": "Deposit $20",
            "description": "Deposit at least $20 during the month.",
            "image_url": ""
        }]
        assert client.get("api/giveaway/content?type=rewards").json()["items"] == []

        deleted = client.delete(f"api/giveaway-content/{created.json()['id']}", headers=admin_headers)
        assert deleted.status_code == 200
        assert client.get("api/giveaway/content?type=rules").json()["items"] == []

    def test_giveaway_content_invalid_type(self, client):
        response = client.get("api/giveaway/content?type=prizes")
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_TYPE"


class TestContentAPI:

    def test_news_lifecycle(self, client, admin_headers):
        created = client.post("api/news", headers=admin_headers, json={"text": "Stream at 8pm", "link": ""})
        assert created.status_code == 201
        assert created.json()["link"] is None

        client.post("api/news", headers=admin_headers, json={"text": "New bonus", "link": "https://example.com"})
        news = client.get("api/news").json()["news"]
        assert [n["text"] for n in news] == ["New bonus", "Stream at 8pm"]

        assert client.delete(f"api/news/{created.json()['id']}", headers=admin_headers).status_code == 200
        assert client.delete(f"api/news/{created.json()['id']}", headers=admin_headers).status_code == 404

    def test_news_requires_valid_link(self, client, admin_headers):
        response = client.post("api/news", headers=admin_headers, json={"text": "x", "link": "ftp://nope"})
        assert response.status_code == 422

    def test_news_post_requires_admin(self, client):
        assert client.post("api/news", json={"text": "x"}).status_code == 401

    def test_schedule_sorted_by_date(self, client, admin_headers):
        client.post("api/schedule", headers=admin_headers, json={"title": "Late", "date": "2025-10-20T20:00:00Z"})
        client.post("api/schedule", headers=admin_headers, json={"title": "Early", "date": "2025-10-05T20:00:00Z"})
        schedule = client.get("api/schedule").json()
        assert [e["title"] for e in schedule] == ["Early", "Late"]

    def test_schedule_requires_title_and_date(self, client, admin_headers):
        response = client.post("api/schedule", headers=admin_headers, json={"title": "No date"})
        assert response.status_code == 422

    def test_reviews(self, client, admin_headers):
        review = {
            "title": "Sweet Bonanza",
            "type": "slot",
            "image": "https://cdn.example.com/sb.png",
            "rating": 4,
            "description": "Tumbling reels."
        }
        created = client.post("api/reviews", headers=admin_headers, json=review)
        assert created.status_code == 201
        review_id = created.json()["id"]

        slots = client.get("api/reviews?type=slot").json()["reviews"]
        assert len(slots) == 1
        assert client.get("api/reviews?type=casino").json()["reviews"] == []

        updated = client.put(f"api/reviews/{review_id}", headers=admin_headers, json={**review, "rating": 5})
        assert updated.status_code == 200
        assert updated.json()["rating"] == 5

        assert client.delete(f"api/reviews/{review_id}", headers=admin_headers).status_code == 200
        assert client.put(f"api/reviews/{review_id}", headers=admin_headers, json=review).status_code == 404

    def test_review_validation(self, client, admin_headers):
        review = {
            "title": "Bad",
            "type": "slot",
            "image": "https://cdn.example.com/x.png",
            "rating": 6,
            "description": "Too good."
        }
        assert client.post("api/reviews", headers=admin_headers, json=review).status_code == 422
        assert client.get("api/reviews?type=poker").status_code == 400
        assert client.get("api/reviews").status_code == 400

    def test_reviews_limited_to_ten(self, client, admin_headers):
        for i in range(12):
            client.post("api/reviews", headers=admin_headers, json={
                "title": f"Casino {i}",
                "type": "casino",
                "image": "https://cdn.example.com/c.png",
                "rating": 3,
                "description": "Fine."
            })
        reviews = client.get("api/reviews?type=casino").json()["reviews"]
        assert len(reviews) == 10
        assert reviews[0]["title"] == "Casino 11"


class TestMediaAPI:

    @pytest.mark.parametrize("kind", ["shorts", "videos"])
    def test_media_lifecycle(self, client, admin_headers, kind):
        first = client.post(f"api/{kind}", headers=admin_headers, json={
            "title": "Big win",
            "description": " 500x on Gates ",
            "image": "https://cdn.example.com/thumb.png",
            "videoUrl": "https://youtube.com/watch?v=abc"
        })
        assert first.status_code == 201
        assert first.json()["description"] == "500x on Gates"
        assert first.json()["videoUrl"] == "https://youtube.com/watch?v=abc"

        client.post(f"api/{kind}", headers=admin_headers, json={
            "title": "Bonus hunt",
            "description": "20 bonuses opened",
            "image": "https://cdn.example.com/hunt.png",
            "videoUrl": "https://kick.com/video/1"
        })
        items = client.get(f"api/{kind}").json()[kind]
        assert [i["title"] for i in items] == ["Bonus hunt", "Big win"]

        item_id = first.json()["id"]
        assert client.delete(f"api/{kind}/{item_id}", headers=admin_headers).status_code == 200
        missing = client.delete(f"api/{kind}/{item_id}", headers=admin_headers)
        assert missing.status_code == 404
        assert missing.json()["error_code"] == "CONTENT_NOT_FOUND"

    @pytest.mark.parametrize("kind", ["shorts", "videos"])
    def test_media_requires_all_fields(self, client, admin_headers, kind):
        response = client.post(f"api/{kind}", headers=admin_headers, json={
            "title": "No video",
            "description": "Missing link",
            "image": "https://cdn.example.com/thumb.png"
        })
        assert response.status_code == 422

        response = client.post(f"api/{kind}", headers=admin_headers, json={
            "title": "Bad link",
            "description": "Not http",
            "image": "https://cdn.example.com/thumb.png",
            "videoUrl": "javascript:alert(1)"
        })
        assert response.status_code == 422

    @pytest.mark.parametrize("kind", ["shorts", "videos"])
    def test_media_writes_require_admin(self, client, kind):
        assert client.post(f"api/{kind}", json={
            "title": "Sneaky",
            "description": "No token",
            "image": "https://cdn.example.com/thumb.png",
            "videoUrl": "https://kick.com/video/2"
        }).status_code == 401
        assert client.delete(f"api/{kind}/1").status_code == 401


class TestContactAndTrackingAPI:

    def test_contact_message(self, client, admin_headers):
        response = client.post("api/contact", json={
            "first_name": " Ada ",
            "last_name": "Lovelace",
            "email": "ADA@example.com",
            "message": "Hello"
        })
        assert response.status_code == 201

        messages = client.get("api/contact", headers=admin_headers).json()
        assert len(messages) == 1
        assert messages[0]["first_name"] == "Ada"
        assert messages[0]["email"] == "ada@example.com"
        assert messages[0]["phone"] is None

        deleted = client.delete(f"api/contact/{messages[0]['id']}", headers=admin_headers)
        assert deleted.status_code == 200

    def test_contact_requires_message(self, client):
        response = client.post("api/contact", json={
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "message": "   "
        })
        assert response.status_code == 422

    def test_tracking(self, client, admin_headers):
        assert client.post("api/tracking/visitors", json={"session_id": "abc"}).status_code == 201
        assert client.post("api/tracking/link-clicks", json={"url": "https://kick.com/x"}).status_code == 201

        visitors = client.get("api/tracking/visitors", headers=admin_headers).json()
        clicks = client.get("api/tracking/link-clicks", headers=admin_headers).json()
        assert [v["session_id"] for v in visitors] == ["abc"]
        assert [c["url"] for c in clicks] == ["https://kick.com/x"]

        assert client.get("api/tracking/visitors").status_code == 401

    def test_health(self, client):
        response = client.get("api")
        assert response.status_code == 200
        assert "running" in response.json()["message"]
