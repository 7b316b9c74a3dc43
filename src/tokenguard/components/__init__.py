# tokenguard components
# Each component keeps pure logic apart from I/O behind ports/adapters
