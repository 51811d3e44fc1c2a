# chefs/tests/test_models.py
import pytest


@pytest.mark.django_db
class TestChefRating:

    def test_defaults(self, chef):
        assert chef.rating == 5
        assert chef.ratings_count == 0
        assert chef.is_active is True
        assert chef.delivery_options == {'delivery': True, 'pickup': True}

    def test_first_rating_replaces_default(self, chef):
        chef.apply_rating(2)
        assert chef.rating == 2
        assert chef.ratings_count == 1

    def test_running_mean(self, chef):
        for value in (5, 4, 3):
            chef.apply_rating(value)
        assert chef.rating == pytest.approx(4.0)
        assert chef.ratings_count == 3
