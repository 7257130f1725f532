from rsatools import RSA

private, public = RSA.generate_keypair(512)

txt = 'deadbeef'
message = RSA.Message.from_hex(txt)

message.encrypt(public)
message.decrypt(private)
assert message == RSA.Message.from_hex(txt)

message.encrypt(private)
message.decrypt(public)
assert message == RSA.Message.from_hex(txt)

key = RSA.generate_key(512)
message = RSA.Message.from_str('kinakuta')
message.encrypt(key.public)
message.decrypt(key.private)
assert message.str() == 'kinakuta'

# print('It works!')
