"""
Tests for the crossover and mutation operators.
"""

import numpy as np
import pytest

from bitevo.core.config import EvolutionConfig
from bitevo.genetic.fitness import FitnessEvaluator, square
from bitevo.genetic.genome import Genome
from bitevo.genetic.operators import mutate, reproduce
from bitevo.genetic.population import Population

pytestmark = [
    pytest.mark.unit,
    pytest.mark.genetic
]


def _ranked_population(*texts):
    population = Population.from_genomes([Genome.from_string(text) for text in texts])
    FitnessEvaluator().evaluate_batch(population)
    population.rank()
    return population


def _assert_consistent(population):
    for individual in population:
        assert individual.value == individual.genome.decode()
        assert individual.fitness == square(individual.value)


class TestReproduce:
    """Test crossover from the elite window."""

    def test_keeps_population_size(self, sample_population, evolution_config, evaluator, rng):
        sample_population.rank()

        result = reproduce(sample_population, evolution_config, rng, evaluator)

        assert result is sample_population
        assert len(sample_population) == 6
        _assert_consistent(sample_population)

    def test_larger_population(self, evaluator, rng):
        config = EvolutionConfig(candidates=10, candidate_size=8)
        population = Population.from_genomes([Genome.random(8, rng) for _ in range(10)])
        evaluator.evaluate_batch(population)
        population.rank()

        reproduce(population, config, rng, evaluator)

        assert len(population) == 10
        assert all(len(individual.genome) == 8 for individual in population)
        _assert_consistent(population)

    def test_forced_parents_and_cut(self, evolution_config, evaluator, mocker):
        population = _ranked_population("11111", "00000", "00000", "00000", "00000", "00000")
        fake_rng = mocker.Mock()
        # first parent index, second parent index, cut point; three times
        fake_rng.integers.side_effect = [0, 1, 2] * 3

        reproduce(population, evolution_config, fake_rng, evaluator)

        assert [str(i.genome) for i in population] == ["11000", "00111"] * 3
        assert [i.value for i in population] == [24, 7] * 3
        assert [i.fitness for i in population] == [576, 49] * 3

    def test_draws_within_elite_window_and_genome(self, evolution_config, evaluator, mocker):
        population = _ranked_population("11111", "11110", "11100", "00000", "00000", "00000")
        fake_rng = mocker.Mock()
        fake_rng.integers.side_effect = [2, 2, 4] * 3

        reproduce(population, evolution_config, fake_rng, evaluator)

        calls = [c.args for c in fake_rng.integers.call_args_list]
        assert calls == [(0, 3), (0, 3), (0, 5)] * 3
        # A parent crossed with itself reproduces it
        assert [str(i.genome) for i in population] == ["11100"] * 6

    def test_parents_come_from_elite(self, evolution_config, evaluator):
        rng = np.random.default_rng(7)
        for _ in range(50):
            population = _ranked_population("11111", "11111", "11111", "00000", "00000", "00000")
            reproduce(population, evolution_config, rng, evaluator)
            assert all(str(i.genome) == "11111" for i in population)

    def test_children_are_new_individuals(self, sample_population, evolution_config, evaluator, rng):
        sample_population.rank()
        parents = sample_population.individuals

        reproduce(sample_population, evolution_config, rng, evaluator)

        assert not any(child is parent for child in sample_population for parent in parents)

    def test_children_fitness_from_own_genome(self, evolution_config, evaluator, rng):
        for _ in range(30):
            population = _ranked_population("10110", "01001", "11011", "00100", "00010", "00001")
            reproduce(population, evolution_config, rng, evaluator)
            _assert_consistent(population)


class TestMutate:
    """Test single-bit mutation."""

    def test_always_mutate_flips_exactly_one_bit(self, sample_population, evaluator):
        config = EvolutionConfig(mutate_rate=1.0)
        before = [individual.genome for individual in sample_population]

        mutated = mutate(sample_population, config, np.random.default_rng(2024), evaluator)

        assert mutated == 6
        for old, individual in zip(before, sample_population):
            assert old.hamming(individual.genome) == 1
        _assert_consistent(sample_population)

    def test_never_mutate_leaves_population_untouched(self, sample_population, evaluator, rng):
        config = EvolutionConfig(mutate_rate=0.0)
        # Deliberately stale cached values must survive untouched
        sample_population[0].fitness = 12345
        before = [(i.genome, i.value, i.fitness) for i in sample_population]

        mutated = mutate(sample_population, config, rng, evaluator)

        assert mutated == 0
        assert [(i.genome, i.value, i.fitness) for i in sample_population] == before

    def test_threshold_uses_strict_less_than(self, evaluator, mocker):
        population = _ranked_population("00000", "00000")
        config = EvolutionConfig(candidates=2, mutate_rate=0.5)
        fake_rng = mocker.Mock()
        fake_rng.random.side_effect = [0.5, 0.49]
        fake_rng.integers.return_value = 0

        mutated = mutate(population, config, fake_rng, evaluator)

        assert mutated == 1
        assert [str(i.genome) for i in population] == ["00000", "10000"]
        assert population[1].fitness == 256
        fake_rng.integers.assert_called_once_with(0, 5)

    def test_mutation_rate_statistics(self, evaluator):
        config = EvolutionConfig(candidates=1000, candidate_size=5, keep=0.5, mutate_rate=0.2)
        rng = np.random.default_rng(99)
        population = Population.from_genomes([Genome.random(5, rng) for _ in range(1000)])
        evaluator.evaluate_batch(population)

        mutated = mutate(population, config, rng, evaluator)

        assert 120 < mutated < 280
        _assert_consistent(population)
