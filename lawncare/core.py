from lawncare.infrastructure.container import Container

# Initialize container
container = Container()
