"""Journal module: photo and video logs of the lawn."""
