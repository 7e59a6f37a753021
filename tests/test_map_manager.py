import pytest

from gravitron.map_manager import MAP_HIDE_Y, MAP_SHOW_Y, MAP_SIZE, MapManager


@pytest.fixture
def map_manager(tmp_path):
    return MapManager(tmp_path)


def _ys(m):
    return {sprite.position.y for sprite in m.children()}


def test_initial_state(map_manager):
    assert map_manager.map_called is False
    assert map_manager.map_move_complete is True
    assert _ys(map_manager) == {MAP_HIDE_Y}
    assert map_manager.mask_cover[0] is False
    assert all(map_manager.mask_cover[1:])
    assert map_manager.current_maps[0].visible is True
    assert not any(s.visible for s in map_manager.current_maps[1:])


def test_children_count_and_paths(map_manager):
    children = map_manager.children()
    assert len(children) == 1 + 3 * MAP_SIZE
    assert children[0].image_path.endswith("Map/allMap.png")
    assert map_manager.current_titles[0].image_path.endswith("Map/MapTitles/(1).png")


def test_call_then_return(map_manager):
    map_manager.map_move_complete = False
    steps = 0
    while not map_manager.map_move_complete:
        map_manager.call_map()
        steps += 1
        assert steps < 100
    assert _ys(map_manager) == {MAP_SHOW_Y}

    map_manager.map_move_complete = False
    while not map_manager.map_move_complete:
        map_manager.return_map()
        steps += 1
        assert steps < 200
    assert _ys(map_manager) == {MAP_HIDE_Y}


def test_call_moves_all_layers_together(map_manager):
    map_manager.call_map()
    assert len(_ys(map_manager)) == 1
    assert map_manager.background.position.y > MAP_HIDE_Y
    assert map_manager.map_move_complete is True


def test_visit_and_current(map_manager):
    map_manager.map_visited(3)
    map_manager.map_current(3)
    map_manager.update_map()
    assert map_manager.masks[3].visible is False
    assert map_manager.masks[4].visible is True
    assert map_manager.current_maps[3].visible is True
    assert map_manager.current_titles[3].visible is True
    assert map_manager.current_maps[0].visible is False
    assert map_manager.is_current.count(True) == 1


def test_out_of_range_index(map_manager):
    with pytest.raises(IndexError):
        map_manager.map_visited(MAP_SIZE)
    with pytest.raises(IndexError):
        map_manager.map_current(-1)