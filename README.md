# sortedsample

Multinomial sampling with replacement in linear time.

Given a list of nonnegative weights, `sortedsample` draws `n` indices.
Each index is chosen independently with probability proportional to its
weight. The indices come out in ascending order, and the whole draw
costs O(len(weights) + n) with no sort. This is the "refresh the
population" step of a particle filter or of sequential importance
sampling.

## Installation

```
pip install sortedsample
```

The package has no runtime dependencies. To run the tests, install the
`test` extra (`pip install "sortedsample[test]"`) and run `pytest`.

## Quick start

```python
import random
from sortedsample.sampling import sample_indices

rng = random.Random(42)
weights = [1.0, 3.0, 2.0, 4.0]       # need not be normalised

indices = list(sample_indices(rng, weights, 1000))
# ascending: indices[0] <= indices[1] <= ... <= indices[-1]

# resample a population
particles = ["a", "b", "c", "d"]
resampled = [particles[i] for i in indices]
```

If you need the indices in random order, shuffle them afterwards with
`rng.shuffle(indices)`.

## The `sortedsample-quick-start` command

```
sortedsample-quick-start [--seed SEED] [--draws DRAWS]
```

Draws indices from the fixed weights `1, 3, 2, 4` and prints a table
with each index's weight, its probability `p(idx)`, how often it was
drawn, and the observed frequency. `--seed` seeds the generator
(default 42); `--draws` sets how many indices to draw (default 1000,
must be at least 1).

The same pieces are available from `sortedsample.quick_start`:

- `tally(indices, size)` counts how often each index in `range(size)`
  occurs and raises `IndexError` for an index outside that range.
- `format_report(weights, counts, draws)` returns the table as a
  string; `draws` must be positive, and `weights` and `counts` must
  have the same length.
- `main(argv=None)` parses the options above, prints the table and
  returns 0.

## API

Everything below lives in `sortedsample.sampling`. Every function takes
an `rng` argument: a `random.Random` instance, or anything with the same
`random()` and `expovariate(lambd)` methods (the `RandomSource`
protocol). Seed it to reproduce a run.

### `sample_indices(rng, weights, n)`

Returns a `SampleIndices` iterator that yields `n` indices into
`weights` in ascending order. It is lazy and takes one `first_uniform`
draw for each index it yields. `len()` gives the number of indices still
to come.

### `sample_indices_buffered(rng, weights, n)`

Same distribution as `sample_indices`, but returns a list of all `n`
indices at once. The sorted uniforms come from normalised partial sums
of `n + 1` exponential variates (`rng.expovariate(1.0)`) instead of one
power per index. With `n == 0` it returns `[]` after checking only that
`weights` is nonempty.

### `SortedUniforms(rng, n)`

An iterator that yields `n` Uniform(0, 1) variates in ascending order.
They are distributed like `n` independent uniforms after sorting, but
are produced one at a time in O(n) total, with no sort. It is useful on
its own, for example for inverse-CDF sampling when you want sorted
output. `len()` gives the number of values still to come.

### `first_uniform(rng, k)`

Draws the minimum of `k` independent Uniform(0, 1) variates, that is a
Beta(1, k) variate, in constant time using `1 - (1 - u) ** (1 / k)`.
This is the step that drives `SortedUniforms`. `k` must be at least 1,
or `ValueError` is raised.

## Input requirements

`n` must be an integer from 0 to 2**32 - 1. A value outside that range
raises `ValueError`, and a non-integer raises `TypeError`.

For both samplers the weights must meet these conditions:

- there is at least one weight;
- every weight is finite and nonnegative;
- the weights sum to a strictly positive value.

A violation raises `ValueError` when the sampler is called, before any
index is drawn. `SampleIndices` checks when it is created, not when it
is first advanced. An index whose weight is zero is never returned.

## Precision

Running totals of weights and of exponential draws use compensated
(Kahan) summation. The rounding error of the cumulative weights then
stays roughly constant however many weights there are. The walk through
the weights repeats the summation used for the total in the same order,
so it stays inside the list.