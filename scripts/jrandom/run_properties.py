import json
import os


class RunProperties:
    """Run settings read from a ``conf.json`` file.

    ``RANDOM_SEED`` and ``RANDOM_COUNT`` in the environment override the
    seed and count; ``RUN_NAME`` overrides the run name unless one is
    passed explicitly. With ``use_env=False`` the file alone decides.
    """

    def __init__(self, json_name, run_name=None, use_env=True):
        with open(json_name, "r") as rf:
            json_object = json.load(rf)

        self.general_prop = json_object.get("general", {})
        self.output_prop = json_object.get("output", {})
        self.compare_prop = json_object.get("compare", {})

        env_seed = os.getenv("RANDOM_SEED") if use_env else None
        self.seed = int(env_seed) if env_seed is not None else int(self.general_prop.get("random_seed", 12345))

        env_count = os.getenv("RANDOM_COUNT") if use_env else None
        self.count = int(env_count) if env_count is not None else int(self.general_prop.get("count", 100))

        if run_name is not None:
            self.run_name = run_name
        else:
            env_run_name = os.getenv("RUN_NAME") if use_env else None
            self.run_name = env_run_name if env_run_name is not None else self.general_prop.get("run_name", "sample")

    def get_run_name(self):
        return self.run_name

    def get_seed(self):
        return self.seed

    def get_count(self):
        return self.count

    def get_mode(self):
        return self.general_prop.get("mode", "rounds")

    def get_buffer_size(self):
        return int(self.output_prop.get("buffer_size", 10000))

    def get_line_limit(self):
        return int(self.output_prop.get("line_limit", 0))

    def get_ulp_tolerance(self):
        return int(self.compare_prop.get("ulp_tolerance", 3))

    def get_output_dir(self):
        return os.path.join(self.output_prop.get("directory", "outputs"), self.run_name)

    def get_output_file(self):
        return os.path.join(self.get_output_dir(), self.output_prop.get("sequence", "py_java_random.txt"))
