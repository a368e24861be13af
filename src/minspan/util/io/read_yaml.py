import yaml

def read_yaml(cf: str | dict,
              override_keys: dict | None=None) -> dict:
    """
    Loads a YAML configuration file from the specified path.

    Parameters
    ----------
    cf : str or dict
        If string, this is the path to the YAML configuration file. If a dict,
        use a copy of it (assume its already read)
    override_keys : dict, optional
        Values that replace keys already present in the configuration. Keys
        whose override value is None are left alone.

    Returns
    -------
    config : dict
        A dictionary containing the configuration parameters.

    Raises
    ------
    FileNotFoundError
        If `cf` is a path that does not exist.
    ValueError
        If the file is not valid YAML, does not hold a mapping, or
        `override_keys` has a key that is not in the configuration.
    """

    if issubclass(type(cf),dict):
        config = dict(cf)
    else:
        with open(cf, 'r') as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Error parsing YAML file '{cf}': {e}") from e

        # An empty file loads as None
        if config is None:
            config = {}

        if not isinstance(config, dict):
            err = f"Configuration file '{cf}' must hold a mapping, not {type(config).__name__}."
            raise ValueError(err)

    # Replace keys from the configuration with keyword arguments passed in.
    if override_keys is not None:
        for k in override_keys:
            if k not in config:
                err = f"override_keys has a key '{k}' that was not in configuration."
                raise ValueError(err)
            if override_keys[k] is not None:
                config[k] = override_keys[k]

    return config
