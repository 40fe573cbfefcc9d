from flappy.collision import CollisionScorer
from flappy.data_models import Bird, Pipe


def gap_pipe(x, passed=False):
    """Gap from y=200 to y=400 on a 600px playfield."""
    return Pipe(x=x, top_height=200, bottom_height=200, passed=passed)


def test_bird_inside_gap_does_not_collide():
    scorer = CollisionScorer()
    assert not scorer.hits_pipe(Bird(x=100, y=250), gap_pipe(90), 600)


def test_bird_above_gap_collides():
    scorer = CollisionScorer()
    assert scorer.hits_pipe(Bird(x=100, y=190), gap_pipe(90), 600)


def test_bird_below_gap_collides():
    scorer = CollisionScorer()
    assert scorer.hits_pipe(Bird(x=100, y=380), gap_pipe(90), 600)


def test_column_edges_are_exclusive():
    scorer = CollisionScorer(bird_width=40, pipe_width=60)
    bird = Bird(x=100, y=10)
    assert not scorer.hits_pipe(bird, gap_pipe(140), 600)
    assert scorer.hits_pipe(bird, gap_pipe(139.9), 600)
    assert not scorer.hits_pipe(bird, gap_pipe(40), 600)
    assert scorer.hits_pipe(bird, gap_pipe(40.1), 600)


def test_pass_requires_bird_fully_beyond_pipe():
    scorer = CollisionScorer()
    bird = Bird(x=100, y=250)
    assert not scorer.has_cleared(bird, gap_pipe(40))
    assert scorer.has_cleared(bird, gap_pipe(39))


def test_two_pipes_passed_in_one_tick_count_twice():
    scorer = CollisionScorer()
    pipes = [gap_pipe(-20), gap_pipe(30), gap_pipe(500)]

    assert scorer.resolve(Bird(x=100, y=250), pipes, 600) == 2
    assert [p.passed for p in pipes] == [True, True, False]


def test_passed_pipe_is_not_counted_again():
    scorer = CollisionScorer()
    pipes = [gap_pipe(30)]
    bird = Bird(x=100, y=250)

    assert scorer.resolve(bird, pipes, 600) == 1
    assert scorer.resolve(bird, pipes, 600) == 0
    assert pipes[0].passed


def test_collision_skips_scoring_for_the_tick():
    scorer = CollisionScorer()
    pipes = [gap_pipe(30), gap_pipe(90)]

    assert scorer.resolve(Bird(x=100, y=100), pipes, 600) is None
    assert not pipes[0].passed
