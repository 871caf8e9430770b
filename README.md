# softmaxlearn

Trains a softmax (multinomial logistic) regression classifier on tabular
data. The package reads a delimited file, encodes and scales its columns, and
fits the weights with mini-batch gradient descent, momentum or Nesterov
updates.

The only runtime dependency is NumPy.

```
pip install .
```

## Command line

```
softmaxlearn data.csv --target t
```

The command reads the file with `read_table`, builds a dataset around the
target column, standardises every feature column (the bias column is left at
1), and trains a `SoftmaxRegression` model whose weights start from
`init_weights(..., seed=1)`. After each iteration it prints the loss and the
weight matrix.

Options:

- `path` – delimited file with a header row.
- `--target` – column to predict, by name or by numeric-column index (default `t`).
- `--delimiter` – field separator (default `,`).
- `--method` – `GD`, `GDM` or `NAG` (default `NAG`).
- `--iterations` – number of passes over the data (default 130).
- `--learning-rate` – step size (default `4e-4`).
- `--batch-size` – mini-batch size (default 32).
- `--seed` – seed for batch shuffling; without it the order differs each run.

Errors while reading the file or choosing the target end the command with a
usage message. See all options with:

```
softmaxlearn --help
```

## Library

### `softmaxlearn.cli`

- `read_table(path, delimiter=",")` returns `(numeric, strings, names)`.
  A column is numeric when every non-missing cell parses as a number; empty
  cells and `nan` count as missing (NaN in numeric columns, the string
  `"nan"` in string columns). `names` lists numeric columns first, then
  string columns.
- `main(argv=None)` runs the command above.

### `softmaxlearn.preprocessing`

- `StandardScaler` – `fit(x, y=None)` learns per-column mean and sample
  standard deviation (at least two samples needed); `transform(x, y=None)`
  returns `(scaled_x, scaled_y)`, with `scaled_y` `None` when no `y` is given.
- `MinMaxScaler` – the same interface, mapping each column onto `[0, 1]` by
  its observed minimum and maximum.
- `LabelEncoder` – `fit(values)` numbers distinct strings in order of first
  appearance; `transform(values)` returns those codes as floats, `-1` for
  values not seen when fitting.
- `OneHotEncoder` – `fit(values)` as above; `transform(values)` returns an
  indicator matrix, with an all-zero row for unseen values.
- `label_to_one_hot(values)` one-hot encodes numeric labels; values that
  agree to three decimals are the same class, and classes are numbered in
  order of first appearance.
- `shuffle_indices(indices, seed=None)` returns a shuffled copy. Random
  swaps are made only among the first two thirds of the positions, so the
  last third keeps its order.
- `SimpleImputer(strategy="mean", fill_value=None, string_fill=None)` –
  `strategy` is `"mean"`, `"median"` or `"constant"` (using `fill_value`,
  one value per numeric column). `string_fill` is `"most_frequent"` or one
  replacement per string column (`None` leaves a column alone); when it is
  `None`, strings are not imputed. `fit(numeric, strings=None)` learns the
  fill values; `transform(numeric, strings=None)` returns imputed copies of
  both tables.
- `NotFittedError` is raised when a scaler or imputer is used before `fit`.

### `softmaxlearn.dataset`

- `Dataset(x, y)` holds the feature matrix, whose last column is a bias of 1,
  and a one-hot target matrix. Its properties are `features` (columns not
  counting the bias), `samples` and `y_types` (number of classes).
- `Dataset.subset(order, begin=0, end=None)` returns the samples
  `order[begin:end]` as a new dataset.
- `Dataset.format(decimal=4, col_space=10, rows=-1)` renders the samples as
  text; a negative or too large `rows` shows them all.
- `build_dataset(numeric, strings=None, names=None, target=0)` label-encodes
  the string columns, one-hot encodes the target column and puts the rest,
  plus the bias, into `x`. `target` is a numeric column index (an `int` or a
  string of digits) or a column name from `names`, which may name a numeric
  or a string column.

### `softmaxlearn.weights`

- `init_weights(features, classes, seed=1)` draws a `(features + 1) × classes`
  matrix uniformly from `[-0.1, 0.1)`.
- `Weights` – `derivative(dataset)` gives the gradient of the mean
  cross-entropy; `gradient_descent(dataset, learning_rate)` takes a plain
  step; `momentum_step(...)` and `nesterov_step(...)` take a step and return
  the new velocity; `format(decimal=8)` renders the matrix as text. All steps
  update the weights in place.

### `softmaxlearn.softmax`

- `cross_entropy(y_pred, y_true)` is the mean negative log-probability of
  each sample's true class.
- `SoftmaxRegression(data, weights, seed=None)` – `predict(dataset=None)`
  returns class probabilities (for the training data by default).
  `train(method="NAG", iterations=130, learning_rate=4e-4, batch_size=32,
  log=None)` trains in place and returns the loss measured at the start of
  each iteration. A `batch_size` of zero, a negative one, or one at least as
  large as the data trains on the whole data as a single batch. `log`, if
  given, receives a progress report after every iteration.

## What it does not do

There is no train/test split, no accuracy or other evaluation measure, and
no way to save trained weights or to classify a new file from the command
line; the command only reports the training loss and weights.

## Running the tests

```
pip install ".[test]"
pytest
```