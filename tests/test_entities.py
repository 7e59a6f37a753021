import math

import pytest

from gravitron.entities import (
    AnimatedCharacter,
    Animation,
    Character,
    Enemy,
    GameObject,
    Player,
    SavePoint,
    Sprite,
    Trap,
    Vec2,
    are_all_doors_open,
    is_inside_the_square,
)


def test_vec2_arithmetic_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2.of((3, 4))
    assert (a + b) - b == a
    assert tuple(b) == (3.0, 4.0)


def test_vec2_normalized_has_unit_length():
    v = Vec2(7.0, -3.0).normalized()
    assert math.isclose(v.length(), 1.0)
    assert Vec2().normalized() == Vec2(0.0, 0.0)


def test_vec2_distance_is_symmetric():
    a, b = Vec2(1, 2), Vec2(-4, 9)
    assert a.distance(b) == b.distance(a)
    assert a.distance(a) == 0


def test_game_object_walk_order():
    root, a, b, c = GameObject(), GameObject(), GameObject(), GameObject()
    root.add_child(a)
    a.add_child(b)
    root.add_children([c])
    assert list(root.walk()) == [root, a, b, c]


def test_sprite_paths():
    s = Sprite("foo", 3, resource_dir="res")
    assert s.image_path == "res/Image/Background/foo.png"
    assert s.z_index == 3
    s.change_image("bar")
    assert s.image_path == "res/Image/Background/bar.png"


def test_character_starts_at_origin_and_moves():
    c = Character("x.png")
    assert c.position == Vec2(0, 0)
    c.move_up()
    assert c.position.y == 20
    c.move_down()
    c.move_right()
    c.move_left()
    assert c.position == Vec2(0, 0)


def test_character_set_image():
    c = Character("x.png")
    c.set_image("y.png")
    assert c.image_path == "y.png"
    assert c.drawable == "y.png"


def test_character_collides():
    a, b = Character("a.png"), Character("b.png")
    a.position = (10, 10)
    b.position = (5, 5)
    assert a.collides(b)
    assert not b.collides(a)


def test_animation_play_pause_and_bounds():
    anim = Animation(["a.png", "b.png"])
    assert anim.playing is False
    anim.play()
    assert anim.playing is True
    anim.pause()
    assert anim.playing is False
    with pytest.raises(IndexError):
        anim.current_frame = 2
    with pytest.raises(ValueError):
        Animation([])


def test_animated_character_playing_and_end():
    c = AnimatedCharacter(["a.png", "b.png"])
    assert c.animation.interval == 500
    assert not c.looping
    c.start_playing()
    assert c.is_playing
    assert c.animation.interval == 100
    c.looping = True
    assert c.looping
    assert not c.animation_ended()
    c.set_frame(1)
    assert c.animation_ended()


def test_player_falls_and_rises():
    p = Player(["a.png", "b.png"])
    p.update()
    assert p.position.y == -15
    p.flip_gravity()
    p.update()
    assert p.position.y == 0


def test_player_flip_gravity_switches_frame():
    p = Player(["a.png", "b.png"])
    p.flip_gravity()
    assert p.gravity_flipped
    assert p.animation.current_frame == 1
    assert not p.is_playing
    p.flip_gravity()
    assert not p.gravity_flipped
    assert p.animation.current_frame == 0


def test_player_move_round_trip():
    p = Player(["a.png"])
    p.move(True)
    assert p.position.x == 15
    p.move(False, 15)
    p.move(True, 4)
    p.move(False, 4)
    assert p.position.x == 0


def test_player_vertical_walls():
    p = Player(["a.png"])
    p.position = (0, 451)
    assert not p.touch_up_wall()
    assert p.position.y == 451
    p.position = (0, 452)
    assert p.touch_up_wall()
    assert p.position.y == -377.5
    p.position = (0, -387.5)
    assert p.touch_down_wall()
    assert p.position.y == 465


def test_player_horizontal_walls():
    p = Player(["a.png"])
    p.position = (-610, 3)
    assert p.touch_left_wall()
    assert p.position == Vec2(600.0, 3.0)
    p.position = (610, 3)
    assert p.touch_right_wall()
    assert p.position == Vec2(-600.0, 3.0)
    p.position = (0, 0)
    assert not p.touch_left_wall()
    assert not p.touch_right_wall()


def test_trap_hitbox_and_image():
    t = Trap((10, 20), resource_dir="res")
    assert t.image_path == "res/Image/Background/Spike.png"
    assert t.touches((10, 20))
    assert t.touches((10 + 44, 20))
    assert not t.touches((10 + 45, 20))
    r = Trap((0, 0), is_reverse=True, resource_dir="res")
    assert r.image_path == "res/Image/Background/SpikeReverse.png"


def test_trap_destroy():
    t = Trap((0, 0))
    t.destroy()
    assert t.visible is False
    assert t.drawable is None


def test_save_point_hitbox_and_image():
    s = SavePoint((0, 0), is_reverse=True, resource_dir="res")
    assert s.image_path == "res/Image/Background/SavePointReverse.png"
    assert s.touches((47, 71))
    assert not s.touches((48, 0))
    assert not s.touches((0, 72))
    s.destroy()
    assert s.visible is False and s.drawable is None


def test_enemy_start_position():
    inc = Enemy("e.png", (0, 0), (0, 100), (10, 10), True)
    dec = Enemy("e.png", (0, 0), (0, 100), (10, 10), False)
    assert inc.position == Vec2(0, 0)
    assert dec.position == Vec2(0, 100)


def test_enemy_entry_from_right_reverses_only_if_allowed():
    rev = Enemy("e.png", (0, 0), (0, 100), (10, 10), True, 10.0, True, 3)
    assert rev.position == Vec2(0, 100)
    assert rev.is_increment is False
    fixed = Enemy("e.png", (0, 0), (0, 100), (10, 10), True, 10.0, False, 3)
    assert fixed.position == Vec2(0, 0)
    assert fixed.is_increment is True


def test_enemy_moves_toward_target():
    e = Enemy("e.png", (0, 0), (0, 100), (10, 10), True, 10.0)
    e.update()
    assert e.position == Vec2(0.0, 10.0)


def test_enemy_turns_around_at_end():
    e = Enemy("e.png", (0, 0), (0, 100), (10, 10), True, 10.0)
    for _ in range(20):
        e.update()
        if not e.is_increment:
            break
    assert not e.is_increment
    assert e.position.distance((0, 100)) < 10.0


def test_enemy_touches_and_destroy():
    e = Enemy("e.png", (0, 0), (0, 100), (90, 130), True)
    assert e.touches((64, 0))
    assert not e.touches((65, 0))
    e.destroy()
    assert e.visible is False and e.drawable is None


def test_is_inside_the_square():
    c = Character("c.png")
    c.position = (100, 0)
    assert is_inside_the_square(c)
    c.position = (0, 0)
    assert not is_inside_the_square(c)
    c.position = (233, 0)
    assert not is_inside_the_square(c)


def test_are_all_doors_open():
    a, b = Character("open.png"), Character("open.png")
    assert are_all_doors_open([a, b], "open.png")
    b.set_image("closed.png")
    assert not are_all_doors_open([a, b], "open.png")
    assert are_all_doors_open([], "open.png")