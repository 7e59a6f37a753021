import dataclasses

import pytest

from gravitron.levels import EnemyInfo, LevelData, LevelID, LevelInfoTable


@pytest.fixture
def table():
    return LevelInfoTable(resource_dir="/res")


def test_every_level_id_is_present(table):
    assert table.level_ids() == tuple(LevelID)
    assert len(table) == len(LevelID)


def test_level_ids_match_map_indices(table):
    assert [int(level) for level in table.level_ids()] == list(range(len(table)))


def test_get_accepts_int_index(table):
    assert table.get(int(LevelID.CONUNDRUM)) is table.get(LevelID.CONUNDRUM)


def test_get_unknown_raises_key_error(table):
    with pytest.raises(KeyError):
        table.get(len(LevelID))


def test_welcome_aboard_pinned(table):
    data = table.get(LevelID.WELCOME_ABOARD)
    assert data.image_name == "1.WelcomeAboardWithNote"
    assert data.background_name == "1.WelcomeAboardBackground"
    assert data.right_wall is LevelID.CONUNDRUM
    assert data.left_wall is LevelID.WELCOME_ABOARD


def test_last_level_pinned(table):
    data = table.get(LevelID.A_WRINKLE_IN_TIME)
    assert data.image_name == "25.AWrinkleInTime"
    assert data.left_wall is LevelID.BRASS_SENT_US_UNDER_THE_TOP


def test_image_names_carry_map_index(table):
    for level in table.level_ids():
        data = table.get(level)
        assert data.image_name.startswith(f"{int(level) + 1}.")
        assert data.background_name.startswith(f"{int(level) + 1}.")
        assert data.background_name.endswith("Background")


def test_walls_point_to_known_levels(table):
    for level in table.level_ids():
        data = table.get(level)
        for wall in (data.up_wall, data.down_wall, data.left_wall, data.right_wall):
            assert wall in table


def test_has_enemies_matches_enemy_list(table):
    for level in table.level_ids():
        data = table.get(level)
        assert data.has_enemies == bool(data.enemy_infos)


def test_save_point_flag_implies_positions(table):
    for level in table.level_ids():
        data = table.get(level)
        if data.has_save_point:
            assert data.save_point_positions or data.save_reverse_positions


def test_trap_positions_imply_trap_flag(table):
    for level in table.level_ids():
        data = table.get(level)
        if data.trap_positions or data.trap_reverse_positions:
            assert data.has_traps


def test_enemy_image_paths_use_resource_dir(table):
    info = table.get(LevelID.TRAFFIC_JAM).enemy_infos[0]
    assert info.image_path == "/res/Image/Background/5.enemy.png"
    assert info.position1 == (220.0, -80.0)
    assert info.position2 == (220.0, 210.0)
    assert info.is_increment is True


def test_only_bbb_busted_enemy_can_reverse(table):
    reversible = [
        level
        for level in table.level_ids()
        for info in table.get(level).enemy_infos
        if info.is_reverse_able
    ]
    assert reversible == [LevelID.BBB_BUSTED]


def test_save_reverse_position_values(table):
    assert table.get(LevelID.TRAFFIC_JAM).save_reverse_positions == ((317.5, -287.5),)
    assert table.get(LevelID.SOLITUDE).save_point_positions == ((-30.0, -227.0),)


def test_fractional_trap_positions_kept(table):
    reverse = table.get(LevelID.ATMOSPHERIC_FILTERING_UNIT).trap_reverse_positions
    assert reverse[0] == (-300.0, 360.0)
    assert (-253.125, 360.0) in reverse
    assert reverse[-1] == (75.0, 360.0)


def test_trap_rows_keep_source_order(table):
    traps = table.get(LevelID.CONUNDRUM).trap_positions
    assert traps[0] == (-201.0, -303.0)
    assert traps[-1] == (199.0, -303.0)
    xs = [x for x, _ in traps]
    assert xs == sorted(xs)
    assert {y for _, y in traps} == {-303.0}


def test_level_data_is_immutable(table):
    data = table.get(LevelID.CONUNDRUM)
    with pytest.raises(dataclasses.FrozenInstanceError):
        data.has_traps = False
    assert table.get(LevelID.CONUNDRUM).has_traps is True


def test_enemy_info_default_not_reversible():
    info = EnemyInfo("x.png", (0.0, 0.0), (1.0, 0.0), (2.0, 2.0), True, 3.0)
    assert info.is_reverse_able is False


def test_level_data_defaults_are_empty():
    data = LevelData(
        "a", "b", LevelID.SORROW, LevelID.SORROW, LevelID.SORROW, LevelID.SORROW,
        False, False, False,
    )
    assert data.trap_positions == ()
    assert data.enemy_infos == ()
    assert data.save_reverse_positions == ()


def test_tables_with_different_resource_dirs_differ_only_in_paths():
    first = LevelInfoTable(resource_dir="/a")
    second = LevelInfoTable(resource_dir="/b")
    one = first.get(LevelID.LINEAR_COLLIDER).enemy_infos[0]
    two = second.get(LevelID.LINEAR_COLLIDER).enemy_infos[0]
    assert one.image_path.replace("/a/", "/b/", 1) == two.image_path
    assert dataclasses.replace(one, image_path=two.image_path) == two