"""Tests for geo module."""

import pytest

from src.geo import CityMap, NameResolver, StraightLineEstimate, haversine, normalize_name
from src.pathfinding import AStarSearch, InvalidInputError, UniformCostSearch


class TestHaversine:
    """Tests for Haversine distance calculation."""

    def test_same_point(self):
        distance = haversine(48.8566, 2.3522, 48.8566, 2.3522)
        assert distance == pytest.approx(0.0, abs=0.001)

    def test_paris_lyon(self):
        # Paris: 48.8566, 2.3522
        # Lyon: 45.7640, 4.8357
        distance = haversine(48.8566, 2.3522, 45.7640, 4.8357)
        # Should be around 390-400 km
        assert 380 < distance < 420

    def test_symmetric(self):
        there = haversine(43.2965, 5.3698, 43.7102, 7.2620)
        back = haversine(43.7102, 7.2620, 43.2965, 5.3698)
        assert there == pytest.approx(back)

    def test_antipodal_points(self):
        distance = haversine(0.0, 0.0, 0.0, 180.0)
        assert distance == pytest.approx(20015.1, abs=1)


class TestStraightLineEstimate:
    """Tests for the A* straight-line estimate."""

    def test_unknown_coordinates_estimate_zero(self):
        estimate = StraightLineEstimate({"Paris": (48.8566, 2.3522)})
        assert estimate("Paris", "Atlantis") == 0.0
        assert estimate("Atlantis", "Paris") == 0.0

    def test_scale(self):
        coordinates = {"Paris": (48.8566, 2.3522), "Lyon": (45.7640, 4.8357)}
        km = StraightLineEstimate(coordinates)("Paris", "Lyon")
        meters = StraightLineEstimate(coordinates, scale=1000)("Paris", "Lyon")
        assert meters == pytest.approx(km * 1000)

    def test_never_exceeds_road_distance(self, city_map):
        estimate = StraightLineEstimate(city_map.coordinates)
        for source, destination, weight in city_map.graph.edges():
            assert estimate(source, destination) <= weight

    def test_astar_matches_dijkstra(self, city_map):
        graph = city_map.graph
        astar = AStarSearch(estimate=StraightLineEstimate(city_map.coordinates))
        dijkstra = UniformCostSearch()
        for source in graph.nodes():
            expected = dijkstra.find_shortest_paths(graph, source)
            for destination in graph.nodes():
                result = astar.search(graph, source, destination)
                assert result.distance_to(destination) == expected.distance_to(destination)


class TestCityMap:
    """Tests for CSV loading."""

    @pytest.fixture
    def files(self, tmp_path):
        cities = tmp_path / "cities.csv"
        cities.write_text(
            "name,lat,lon\n"
            "Paris,48.8566,2.3522\n"
            "Lyon,45.7640,4.8357\n"
            "Nowhere,not-a-number,0\n",
            encoding="utf-8",
        )
        roads = tmp_path / "roads.csv"
        roads.write_text(
            "from,to,distance,two_way\n"
            "Paris,Lyon,465,yes\n"
            "Lyon,Grenoble,110.5,\n"
            "Grenoble,Nice,-3,yes\n"
            "Nice,,200,\n"
            "Paris,Lille,abc,\n",
            encoding="utf-8",
        )
        return roads, cities

    def test_load(self, files):
        roads, cities = files
        city_map = CityMap.from_files(roads, cities)

        assert set(city_map.cities) == {"Paris", "Lyon"}
        assert city_map.graph.weight("Paris", "Lyon") == 465
        assert city_map.graph.weight("Lyon", "Paris") == 465
        assert city_map.graph.weight("Lyon", "Grenoble") == 110.5
        assert city_map.graph.weight("Grenoble", "Lyon") is None
        assert city_map.rows_skipped == 4

    def test_negative_road_not_added(self, files):
        roads, cities = files
        city_map = CityMap.from_files(roads, cities)
        assert city_map.graph.weight("Grenoble", "Nice") is None
        assert "Nice" not in city_map.graph

    def test_non_finite_values_skipped(self, tmp_path):
        cities = tmp_path / "cities.csv"
        cities.write_text(
            "name,lat,lon\n"
            "Paris,48.8566,2.3522\n"
            "Lyon,nan,4.8357\n"
            "Nice,43.7102,inf\n",
            encoding="utf-8",
        )
        roads = tmp_path / "roads.csv"
        roads.write_text(
            "from,to,distance,two_way\n"
            "Paris,Lyon,inf,yes\n"
            "Paris,Nice,930,yes\n",
            encoding="utf-8",
        )
        city_map = CityMap.from_files(roads, cities)

        assert set(city_map.cities) == {"Paris"}
        assert city_map.graph.weight("Paris", "Lyon") is None
        assert city_map.graph.weight("Paris", "Nice") == 930
        assert city_map.rows_skipped == 3

    def test_integer_distances_stay_integers(self, files):
        roads, _ = files
        city_map = CityMap.from_files(roads)
        assert isinstance(city_map.graph.weight("Paris", "Lyon"), int)

    def test_coordinates(self, files):
        roads, cities = files
        city_map = CityMap.from_files(roads, cities)
        assert city_map.coordinates["Paris"] == (48.8566, 2.3522)
        assert "Grenoble" not in city_map.coordinates

    def test_shipped_map(self, city_map):
        assert city_map.rows_skipped == 0
        assert len(city_map.graph) == 12
        assert set(city_map.cities) == city_map.graph.nodes()


class TestNameResolver:
    """Tests for NameResolver."""

    @pytest.fixture
    def resolver(self):
        return NameResolver(["Paris", "Marseille", "Saint-Étienne", "Lyon"])

    def test_normalize_name(self):
        assert normalize_name("Paris") == "paris"
        assert normalize_name("Saint-Étienne") == "saint etienne"
        assert normalize_name("  LYON ") == "lyon"

    def test_exact(self, resolver):
        assert resolver.resolve("Paris") == "Paris"

    def test_case_and_accents(self, resolver):
        assert resolver.resolve("paris") == "Paris"
        assert resolver.resolve("saint etienne") == "Saint-Étienne"
        assert resolver.resolve("  LYON  ") == "Lyon"

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty(self, resolver, text):
        with pytest.raises(InvalidInputError):
            resolver.resolve(text)

    def test_unknown_with_suggestion(self, resolver):
        with pytest.raises(InvalidInputError) as excinfo:
            resolver.resolve("Marseile")
        assert excinfo.value.suggestions == ["Marseille"]
        assert "Did you mean: Marseille?" in str(excinfo.value)

    def test_unknown_without_suggestion(self, resolver):
        with pytest.raises(InvalidInputError) as excinfo:
            resolver.resolve("Zzyzx")
        assert excinfo.value.suggestions == []

    def test_non_string_nodes(self):
        resolver = NameResolver([1, 2, 3])
        assert resolver.resolve("2") == 2
