from tqdm import tqdm

#=============================================================================#
# console output

def log(message, prefix=""):
    print(prefix + f"⚙\t{message}")

def add_tqdm(inputs, total=None, description=None):
    """Wraps an iterator with a tqdm progress bar.

    :inputs: an iterable.
    :total: the number of elements in the iterable. This argument is non-optional if `inputs` does not implement __len__!
    :description: passed to the `desc` field of the tqdm object."""
    if total == None:
        total = len(inputs)
    return tqdm(inputs, total=total, leave=False, desc=description)
