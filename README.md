# genalgo

genalgo builds small fully connected neural networks and evolves them with a
genetic algorithm. It does not use backpropagation. The package also has a
binary classification problem: predict whether a fund's price goes up the
next day, using common technical indicators as inputs.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install .[test]
pytest
```

## Command line

```
genalgo
```

The command builds a demonstration network:

- 3 inputs,
- a hidden layer of 4 neurons with ReLU,
- a hidden layer of 4 neurons with Tanh,
- a Softmax output of 2 values.

It then does the following, in order:

1. Prints the architecture and every weight.
2. Runs a forward pass on `[0.5, -0.3, 1.2]` and prints the output.
3. Takes the flat genome and prints its size.
4. Adds 0.1 to the first gene.
5. Loads the genome back into the network.
6. Prints the weights again.

The command has no options except `--help`.

## Library overview

### `genalgo.activations`

- `Activation` is an enum with these members: `LINEAR`, `RELU`, `LEAKY_RELU`,
  `SIGMOID`, `TANH`, `SWISH` and `SOFTMAX`.
- `activation_fn(act, x)` applies one activation to a scalar.
  - `LEAKY_RELU` uses a slope of 0.01.
  - `SWISH` is `x * sigmoid(x)`.
  - `SOFTMAX` returns `x` unchanged, because softmax works on a whole vector.
- `softmax(values)` returns the numerically stable softmax of a sequence. It
  raises `ValueError` if the sequence is empty.

### `genalgo.layers`

`random_value()` returns a uniform random value in [-1, 1].

`DenseLayer(rows, cols, activation=Activation.RELU)` holds:

- a row-major weight matrix `data` of shape `(rows, cols)`,
- one bias per output neuron in `bias`.

The weights and biases start with random values.

You can index a layer as `layer[r, c]`. An index outside the matrix raises
`IndexError`.

Methods:

- `randomize()` fills the weights and biases again with values from
  `random_value()`.
- `apply_activation(values)` returns the values passed through the layer's
  activation.
- `propagate(inputs)` returns `activation(inputs @ W + bias)`.
- `memory_usage_report()` returns diagnostic text about the layer's memory.
- `weights_report()` returns diagnostic text listing the weights and biases.

### `genalgo.network`

```python
from genalgo.activations import Activation
from genalgo.network import NeuralNetwork

net = NeuralNetwork(3, 2, [4, 4], [Activation.RELU, Activation.TANH], Activation.SOFTMAX)
out = net.forward([0.5, -0.3, 1.2])

genome = net.to_genome()
genome[0] += 0.1
net.load_genome(genome)
print(net.total_weights())
print(net.architecture())
```

`to_genome()` lists the layers in order: the hidden layers first, then the
output layer. For each layer it lists the weights, then the biases.

The output activation defaults to `SOFTMAX`.

The constructor raises `ValueError` in these cases:

- the number of hidden sizes is not the same as the number of activations,
- the input size, the output size or any hidden size is not positive.

Two methods also raise `ValueError`:

- `forward` raises it when the input length is not the same as `input_size`.
- `load_genome` raises it when the genome length is not the same as
  `total_weights()`.

`architecture()` returns a summary of the layers as text.
`architecture_detail()` returns the full dump that the command prints.

### `genalgo.price_direction`

`load_data(file_path)` reads a CSV file. The file starts with a header line.
Each line after the header has the form `date,nav`, and blank lines are
skipped. For each row it computes:

- EMA 20, EMA 50 and EMA 200,
- 5-day and 20-day momentum,
- RSI(14), normalised to [0, 1],
- the 20-day volatility of the daily log-returns,
- the direction label for the next day.

It then drops two kinds of rows:

- the first 199 rows, where EMA 200 is not yet defined,
- the last row, which has no next day.

Each row it returns is a `StockPrice`.

`load_data` raises these errors:

- `OSError` if the file cannot be opened,
- `ValueError` if a NAV value is not a number,
- `ValueError` if the file has fewer than 200 price rows.

`StockPrice.to_features()` returns the 7 inputs for the network:

- the NAV relative to each EMA,
- the two momentum values,
- the RSI,
- the volatility.

`str(price)` renders the record in a readable form.

The indicator helpers are `get_sma`, `get_ema`, `get_rsi` (period 14 by
default) and `get_volatility` (period 20 by default). They raise `ValueError`
in these cases:

- there are not enough earlier rows,
- the period is less than 1.

### `genalgo.ga`

`initialize_population(...)` builds a list of random networks that all have
the same shape.

`evaluate_fitness(network, data)` returns the negative mean binary
cross-entropy of the network's first output against the direction labels. A
higher value is better. It raises `ValueError` if `data` is empty.

`run(...)` runs three rounds. In each round it does the following:

1. Scores every candidate.
2. Prints each score and the mean score.
3. Removes the candidates that score below the mean.
4. Replaces them with new random networks.

It returns the final population.

```python
from genalgo.activations import Activation
from genalgo.ga import run
from genalgo.price_direction import load_data

data = load_data("prices.csv")
population = run(20, 7, 1, [8, 8], [Activation.RELU, Activation.TANH], Activation.SIGMOID, data)
```

## What the package does not do

- The `genalgo` command does not load price data and does not run the genetic
  algorithm. To do that, call `load_data` and `run` from Python.
- The genetic algorithm only removes candidates and replaces them with new
  random networks. It does not do crossover or mutation of survivors.
- Networks and genomes are not saved to disk.