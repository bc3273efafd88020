"""HTTP-level tests for the /api/meals endpoints."""
from datetime import date

import pytest

from data.meals_dataset import SEED_MEALS
from services.meal_service import meal_service

FIXED_TODAY = date(2026, 10, 19)

NEW_MEAL = {"name": "Pytt i panna", "category": "meat", "lastCooked": "2026-03-01", "timesCooked": 2}


@pytest.fixture
def fixed_today(monkeypatch):
    monkeypatch.setattr(meal_service, "today", lambda: FIXED_TODAY)
    return FIXED_TODAY


def _ids(response):
    return [m["id"] for m in response.json()]


def _get_meal(client, meal_id):
    return next(m for m in client.get("/api/meals").json() if m["id"] == meal_id)


class TestListMeals:
    def test_returns_seeded_meals_with_camel_case_fields(self, client):
        response = client.get("/api/meals")
        assert response.status_code == 200
        meals = response.json()
        assert len(meals) == len(SEED_MEALS)
        assert set(meals[0].keys()) == {"id", "name", "category", "lastCooked", "timesCooked"}

    def test_default_sort_is_last_cooked_ascending(self, client):
        meals = client.get("/api/meals").json()
        dates = [m["lastCooked"] for m in meals]
        assert dates == sorted(dates)
        assert meals[0]["name"] == "Raggmunk med flask"
        assert meals[-1]["name"] == "Fiskgratang"

    @pytest.mark.parametrize("sort_by", ["bogus", "", "last_cooked", "id; DROP TABLE meals"])
    def test_unknown_sort_field_behaves_like_last_cooked(self, client, sort_by):
        expected = _ids(client.get("/api/meals", params={"sortBy": "lastCooked"}))
        assert _ids(client.get("/api/meals", params={"sortBy": sort_by})) == expected

    def test_unknown_order_means_ascending(self, client):
        expected = _ids(client.get("/api/meals", params={"sortBy": "name", "order": "asc"}))
        assert _ids(client.get("/api/meals", params={"sortBy": "name", "order": "DESC"})) == expected
        assert _ids(client.get("/api/meals", params={"sortBy": "name", "order": "sideways"})) == expected

    @pytest.mark.parametrize("sort_by", ["name", "lastCooked", "timesCooked"])
    def test_desc_reverses_asc_for_unique_keys(self, client, sort_by):
        asc = _ids(client.get("/api/meals", params={"sortBy": sort_by, "order": "asc"}))
        desc = _ids(client.get("/api/meals", params={"sortBy": sort_by, "order": "desc"}))
        assert desc == list(reversed(asc))

    def test_ties_break_on_ascending_id_in_both_directions(self, client):
        asc = client.get("/api/meals", params={"sortBy": "category", "order": "asc"}).json()
        desc = client.get("/api/meals", params={"sortBy": "category", "order": "desc"}).json()

        assert [m["category"] for m in asc] == sorted(m["category"] for m in asc)
        assert [m["category"] for m in desc] == sorted((m["category"] for m in desc), reverse=True)
        for meals in (asc, desc):
            for category in ("meat", "vegetarian", "fish"):
                ids = [m["id"] for m in meals if m["category"] == category]
                assert ids == sorted(ids)

    def test_sort_by_times_cooked(self, client):
        meals = client.get("/api/meals", params={"sortBy": "timesCooked", "order": "desc"}).json()
        assert meals[0]["name"] == "Kottbullar med potatismos"
        assert meals[0]["timesCooked"] == 15


class TestCreateMeal:
    def test_create_returns_201_and_persisted_record(self, client):
        response = client.post("/api/meals", json=NEW_MEAL)
        assert response.status_code == 201
        created = response.json()
        assert created["name"] == "Pytt i panna"
        assert created["category"] == "meat"
        assert created["lastCooked"] == "2026-03-01"
        assert created["timesCooked"] == 2

    def test_created_ids_are_new_and_listed(self, client):
        existing = set(_ids(client.get("/api/meals")))
        first = client.post("/api/meals", json=NEW_MEAL).json()
        second = client.post("/api/meals", json={**NEW_MEAL, "name": "Janssons frestelse"}).json()

        assert first["id"] not in existing
        assert second["id"] not in existing
        assert second["id"] > first["id"]
        listed = set(_ids(client.get("/api/meals")))
        assert {first["id"], second["id"]} <= listed

    def test_round_trip_matches_list_entry(self, client):
        created = client.post("/api/meals", json=NEW_MEAL).json()
        assert _get_meal(client, created["id"]) == created

    def test_name_is_trimmed(self, client):
        response = client.post("/api/meals", json={**NEW_MEAL, "name": " AB "})
        assert response.status_code == 201
        assert response.json()["name"] == "AB"

    @pytest.mark.parametrize("name", ["A", "  A  ", "", None, 42])
    def test_short_or_non_text_name_is_rejected(self, client, name):
        response = client.post("/api/meals", json={**NEW_MEAL, "name": name})
        assert response.status_code == 400
        assert response.json()["error"] == "Name must be at least 2 characters."

    @pytest.mark.parametrize("category", ["dessert", "chicken", "soup", "Meat", None])
    def test_category_outside_enforced_set_is_rejected(self, client, category):
        response = client.post("/api/meals", json={**NEW_MEAL, "category": category})
        assert response.status_code == 400
        assert response.json()["error"] == "Category must be meat, vegetarian, or fish."

    @pytest.mark.parametrize("last_cooked", ["2024-1-5", "05-01-2024", "2024-01-05T10:00", "", None])
    def test_malformed_date_is_rejected(self, client, last_cooked):
        response = client.post("/api/meals", json={**NEW_MEAL, "lastCooked": last_cooked})
        assert response.status_code == 400
        assert response.json()["error"] == "lastCooked must be in YYYY-MM-DD format."

    def test_date_check_is_format_only(self, client):
        # Calendar validity is deliberately not checked.
        response = client.post("/api/meals", json={**NEW_MEAL, "lastCooked": "2024-13-40"})
        assert response.status_code == 201
        assert response.json()["lastCooked"] == "2024-13-40"

    @pytest.mark.parametrize("times_cooked", [-1, 1.5, "two", None, True])
    def test_invalid_times_cooked_is_rejected(self, client, times_cooked):
        response = client.post("/api/meals", json={**NEW_MEAL, "timesCooked": times_cooked})
        assert response.status_code == 400
        assert response.json()["error"] == "timesCooked must be a non-negative integer."

    @pytest.mark.parametrize("times_cooked,expected", [(0, 0), ("3", 3), (4.0, 4)])
    def test_numeric_times_cooked_is_coerced(self, client, times_cooked, expected):
        response = client.post("/api/meals", json={**NEW_MEAL, "timesCooked": times_cooked})
        assert response.status_code == 201
        assert response.json()["timesCooked"] == expected

    @pytest.mark.parametrize("times_cooked", [2 ** 63, 10 ** 20, "99999999999999999999"])
    def test_times_cooked_beyond_integer_column_is_rejected(self, client, times_cooked):
        response = client.post("/api/meals", json={**NEW_MEAL, "timesCooked": times_cooked})
        assert response.status_code == 400
        assert response.json()["error"] == "timesCooked must be a non-negative integer."

    def test_largest_integer_times_cooked_is_stored(self, client):
        response = client.post("/api/meals", json={**NEW_MEAL, "timesCooked": 2 ** 63 - 1})
        assert response.status_code == 201
        assert response.json()["timesCooked"] == 2 ** 63 - 1

    def test_rejected_create_does_not_insert(self, client):
        before = len(client.get("/api/meals").json())
        client.post("/api/meals", json={**NEW_MEAL, "category": "dessert"})
        assert len(client.get("/api/meals").json()) == before

    def test_non_object_body_is_rejected(self, client):
        response = client.post("/api/meals", json=["Pytt i panna"])
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body."


class TestMarkCookedToday:
    def test_sets_today_and_increments_count(self, client, fixed_today):
        before = _get_meal(client, 1)
        response = client.post("/api/meals/1/cooked-today")
        assert response.status_code == 200
        updated = response.json()
        assert updated["lastCooked"] == fixed_today.isoformat()
        assert updated["timesCooked"] == before["timesCooked"] + 1
        assert updated["name"] == before["name"]
        assert _get_meal(client, 1) == updated

    def test_other_meals_are_untouched(self, client, fixed_today):
        before = {m["id"]: m for m in client.get("/api/meals").json()}
        client.post("/api/meals/3/cooked-today")
        after = {m["id"]: m for m in client.get("/api/meals").json()}
        for meal_id, meal in before.items():
            if meal_id != 3:
                assert after[meal_id] == meal

    def test_unknown_id_returns_404_and_mutates_nothing(self, client):
        before = client.get("/api/meals").json()
        response = client.post("/api/meals/999/cooked-today")
        assert response.status_code == 404
        assert response.json()["error"] == "Meal not found."
        assert client.get("/api/meals").json() == before

    def test_id_beyond_integer_column_returns_404(self, client):
        before = client.get("/api/meals").json()
        response = client.post("/api/meals/99999999999999999999/cooked-today")
        assert response.status_code == 404
        assert response.json()["error"] == "Meal not found."
        assert client.get("/api/meals").json() == before

    @pytest.mark.parametrize("meal_id", ["0", "-1", "abc", "1.5"])
    def test_invalid_id_returns_400(self, client, meal_id):
        response = client.post(f"/api/meals/{meal_id}/cooked-today")
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid meal id."


class TestRenameMeal:
    def test_rename_trims_and_persists(self, client):
        response = client.patch("/api/meals/2", json={"name": "  Pannbiff med lok  "})
        assert response.status_code == 200
        assert response.json()["name"] == "Pannbiff med lok"
        assert _get_meal(client, 2)["name"] == "Pannbiff med lok"

    def test_rename_only_changes_name(self, client):
        before = _get_meal(client, 2)
        updated = client.patch("/api/meals/2", json={"name": "Renamed"}).json()
        assert {**before, "name": "Renamed"} == updated

    @pytest.mark.parametrize("name", ["", "   ", "x", None, 12])
    def test_invalid_name_returns_400(self, client, name):
        response = client.patch("/api/meals/2", json={"name": name})
        assert response.status_code == 400
        assert response.json()["error"] == "Name must be at least 2 characters."

    def test_unknown_id_returns_404(self, client):
        response = client.patch("/api/meals/999", json={"name": "Ghost meal"})
        assert response.status_code == 404

    def test_id_beyond_integer_column_returns_404(self, client):
        response = client.patch("/api/meals/99999999999999999999", json={"name": "Ghost meal"})
        assert response.status_code == 404
        assert response.json()["error"] == "Meal not found."

    def test_oversized_id_with_bad_name_reports_the_name(self, client):
        response = client.patch("/api/meals/99999999999999999999", json={"name": " "})
        assert response.status_code == 400

    def test_invalid_id_returns_400(self, client):
        response = client.patch("/api/meals/abc", json={"name": "Valid name"})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid meal id."
