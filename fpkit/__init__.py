from fpkit.cursor import Cursor, pairs, values, collect, iterate, nth
from fpkit.lazy import \
    itfilter,         \
    itfilterWithKeys, \
    itmap,            \
    itmapWithKeys,    \
    ittake,           \
    ittakeWhile
from fpkit.eager import \
    afilter,         \
    afilterWithKeys, \
    all,             \
    allWithKeys,     \
    amap,            \
    amapWithKeys,    \
    any,             \
    anyWithKeys,     \
    append,          \
    atake,           \
    bind,            \
    chain,           \
    chunk,           \
    compact,         \
    concat,          \
    contains,        \
    difference,      \
    dropWhile,       \
    elem,            \
    every,           \
    filter,          \
    find,            \
    findIndex,       \
    first,           \
    firstValue,      \
    firstValueWithKeys, \
    firstWithKeys,   \
    flatMap,         \
    flatten,         \
    fold,            \
    foldl,           \
    foldr,           \
    groupBy,         \
    head,            \
    headtail,        \
    indexBy,         \
    init,            \
    intersection,    \
    keyedMap,        \
    last,            \
    lift,            \
    liftA2,          \
    liftA3,          \
    map,             \
    partition,       \
    pluck,           \
    prepend,         \
    reduce,          \
    reduceUntil,     \
    reduceWithKeys,  \
    reject,          \
    reverse,         \
    scan,            \
    sequence,        \
    some,            \
    sortBy,          \
    sortWith,        \
    tail,            \
    takeWhile,       \
    traverse,        \
    union,           \
    unique,          \
    uniqueBy,        \
    unzip,           \
    zip,             \
    zipWith
from fpkit.compose import compose, pipe, pipeline
from fpkit.predicates import \
    andPred,      \
    between,      \
    equals,       \
    gt,           \
    gte,          \
    isEmpty,      \
    isNotEmpty,   \
    lt,           \
    lte,          \
    not_,         \
    orPred,       \
    strictEquals, \
    typeIs
from fpkit.util import \
    ap,        \
    apply,     \
    constant,  \
    assign,    \
    curry,     \
    debounce,  \
    flip,      \
    get,       \
    identity,  \
    juxt,      \
    maybe,     \
    memoize,   \
    method,    \
    omit,      \
    partial,   \
    path,      \
    pick,      \
    prop,      \
    retry,     \
    serialize, \
    set,       \
    tap,       \
    throttle,  \
    trace,     \
    unless,    \
    when
from fpkit.numeric import \
    average,     \
    clamp,       \
    closedRange, \
    maxValue,    \
    mean,        \
    median,      \
    minValue,    \
    product,     \
    sum
from fpkit.strings import \
    explode,  \
    implode,  \
    join,     \
    lines,    \
    ltrim,    \
    match,    \
    matchAll, \
    padLeft,  \
    pregMatch, \
    padRight, \
    replace,  \
    rtrim,    \
    slugify,  \
    split,    \
    trim,     \
    words
from fpkit.records import Evolvable, Newable, fieldNames, fieldValues
from fpkit.errors import \
    FpkitError,                 \
    InvalidChunkSizeError,      \
    InvalidTupleError,          \
    RetryFailedError,           \
    StepDirectionMismatchError, \
    ZeroStepError
